"""dpi-admin CLI for reviewing the role permission table."""

import typer
from rich.console import Console
from rich.table import Table

from dpi_admin import __version__
from dpi_admin.core.rbac import (
    Action,
    AdminRole,
    Resource,
    get_permissions,
    get_role_label,
    has_permission,
    lattice_violations,
    resolve_role,
)


console = Console()

app = typer.Typer(
    name="dpi-admin",
    help="Inspect the admin role permission table.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _mark(allowed: bool) -> str:
    return "[green]yes[/green]" if allowed else "[dim]-[/dim]"


def _known_role(role: str) -> AdminRole:
    # An empty argument would resolve to viewer; require an explicit role
    known = resolve_role(role) if role else None
    if known is None:
        choices = ", ".join(r.value for r in AdminRole)
        console.print(f"[red]Error:[/red] Unknown role '{role}'. Choose from: {choices}")
        raise typer.Exit(code=2)
    return known


@app.command(name="roles")
def list_roles() -> None:
    """List the admin roles."""
    table = Table(title="Admin Roles", show_header=True)
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Grants", justify="right", style="green")

    for role in AdminRole:
        grants = sum(
            record.allows(action)
            for record in get_permissions(role).values()
            for action in Action
        )
        table.add_row(role.value, get_role_label(role), str(grants))

    console.print()
    console.print(table)
    console.print()


@app.command(name="permissions")
def show_permissions(
    role: str = typer.Argument(..., help="Role to show (e.g. moderator)"),
) -> None:
    """Show the permission matrix of a role."""
    known = _known_role(role)

    table = Table(title=f"{get_role_label(known)} permissions", show_header=True)
    table.add_column("Resource", style="cyan", no_wrap=True)
    for action in Action:
        table.add_column(action.value, justify="center")

    for resource, record in get_permissions(known).items():
        table.add_row(
            resource.value, *(_mark(record.allows(action)) for action in Action)
        )

    console.print()
    console.print(table)
    console.print()


@app.command(name="check")
def check(
    role: str = typer.Argument(..., help="Role tag"),
    resource: str = typer.Argument(..., help="Resource (e.g. beneficiaries)"),
    action: str = typer.Argument(..., help="Action (e.g. delete)"),
) -> None:
    """Check one permission. Exits 0 if allowed and 1 if denied."""
    if has_permission(role, resource, action):
        console.print(f"[green]allowed[/green] {role} may {action} {resource}")
        raise typer.Exit(code=0)

    console.print(f"[red]denied[/red] {role} may not {action} {resource}")
    if resource not in set(Resource) or action not in set(Action):
        console.print("[yellow]Note:[/yellow] unknown resource or action")
    raise typer.Exit(code=1)


@app.command(name="lattice")
def lattice() -> None:
    """Verify that each role holds every grant of the role below it."""
    violations = lattice_violations()
    if not violations:
        console.print("[green]OK[/green] viewer <= moderator <= super_admin")
        return

    for violation in violations:
        console.print(f"[red]violation[/red] {violation}")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """dpi-admin - Inspect the admin role permission table."""
    if version:
        console.print(f"[bold cyan]dpi-admin[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
