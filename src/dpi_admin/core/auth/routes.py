"""Admin authentication routes."""

from fastapi import APIRouter, Request, status

from dpi_admin.config import settings
from dpi_admin.core.auth.dependencies import CurrentSession
from dpi_admin.core.auth.schemas import AdminResponse, LoginRequest, TokenResponse
from dpi_admin.core.auth.service import AuthSvc
from dpi_admin.core.logging import get_client_ip
from dpi_admin.core.rbac import PermissionContext


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Admin login",
    description="Authenticate with username and password to receive an access token.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
    request: Request,
) -> TokenResponse:
    account, token = await service.login(
        username=data.username,
        password=data.password,
        ip_address=get_client_ip(request),
    )
    context = PermissionContext(account.role)

    return TokenResponse(
        access_token=token,
        expires_in=settings.access_token_expire_minutes * 60,
        admin=AdminResponse(
            id=account.id,
            full_name=account.full_name,
            email=account.email,
            role=account.role.value,
            role_label=context.role_label,
        ),
    )


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout",
    description="Revoke the current access token.",
)
async def logout(
    session: CurrentSession,
    service: AuthSvc,
    request: Request,
) -> None:
    await service.logout(session, ip_address=get_client_ip(request))


@router.get(
    "/me",
    response_model=AdminResponse,
    summary="Current admin",
)
async def me(session: CurrentSession) -> AdminResponse:
    context = PermissionContext.from_session(session)
    return AdminResponse(
        id=session.admin_id,
        full_name=session.full_name,
        email=session.email,
        role=session.role,
        role_label=context.role_label,
    )
