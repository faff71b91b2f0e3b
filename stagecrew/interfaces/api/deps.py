"""FastAPI dependencies — principal resolution, role gate and work mode."""

from typing import Callable, Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stagecrew.application.services.auth_service import decode_access_token
from stagecrew.config import get_settings
from stagecrew.core.exceptions import ForbiddenException, UnauthorizedException
from stagecrew.domain.roles import PERMISSIONS, Action, Principal, Role, WorkMode

settings = get_settings()
security = HTTPBearer(auto_error=False)


def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Principal]:
    """Principal from the session token. The store is not consulted."""
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials)


def get_principal(principal: Optional[Principal] = Depends(get_optional_principal)) -> Principal:
    if principal is None:
        raise UnauthorizedException()
    return principal


def require_role(allowed: Iterable[Role]) -> Callable[..., Principal]:
    allowed = frozenset(allowed)

    def dependency(principal: Principal = Depends(get_principal)) -> Principal:
        if principal.role not in allowed:
            raise ForbiddenException()
        return principal

    return dependency


def require_permission(action: Action) -> Callable[..., Principal]:
    return require_role(PERMISSIONS[action])


def get_work_mode(request: Request) -> WorkMode:
    """Work mode from the request only: cookie first, then header. Defaults to admin."""
    value = request.cookies.get(settings.WORK_MODE_COOKIE)
    if value is None:
        value = request.headers.get(settings.WORK_MODE_HEADER)
    return WorkMode.WORKER if value == WorkMode.WORKER.value else WorkMode.ADMIN
