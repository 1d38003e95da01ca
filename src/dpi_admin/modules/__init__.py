"""Feature modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Return the routers of all feature modules.

    Every subpackage that exposes a ``router`` attribute is mounted. An
    import error is a bug in the module and is raised, not skipped.

    Returns:
        List of FastAPI routers, in directory name order
    """
    modules_dir = Path(__file__).parent
    routers: list[APIRouter] = []

    for path in sorted(modules_dir.iterdir()):
        if not path.is_dir() or path.name.startswith("_"):
            continue
        module = import_module(f"{__name__}.{path.name}")
        router = getattr(module, "router", None)
        if router is not None:
            routers.append(router)
            logger.debug("module_loaded", module=path.name)

    return routers
