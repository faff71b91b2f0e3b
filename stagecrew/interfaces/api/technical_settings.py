"""Technical settings API routes — SUPER_ADMIN only."""

from typing import List

from fastapi import APIRouter, Depends

from stagecrew.application.services import account_service, auth_service
from stagecrew.core.exceptions import BadRequestException, server_errors
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.roles import Action, Principal
from stagecrew.domain.schemas.notification import OkResponse
from stagecrew.domain.schemas.user import LockedAccount, VerifyPasswordRequest
from stagecrew.interfaces.api.deps import require_permission
from stagecrew.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/settings/technical", tags=["Technical settings"])


@router.get("/locked-accounts", response_model=List[LockedAccount])
def locked_accounts(
    _: Principal = Depends(require_permission(Action.TECHNICAL_SETTINGS)),
    repo: UserRepository = Depends(get_user_repository),
):
    with server_errors("Error fetching locked accounts"):
        return account_service.list_locked_accounts(repo)


@router.post("/verify-password", response_model=OkResponse)
def verify_password(
    body: VerifyPasswordRequest,
    principal: Principal = Depends(require_permission(Action.VERIFY_PASSWORD)),
    repo: UserRepository = Depends(get_user_repository),
):
    password = (body.password or "").strip()
    if not password:
        raise BadRequestException("Password is required")

    with server_errors("Error verifying password"):
        auth_service.verify_password(repo, principal.id, password)
    return OkResponse()
