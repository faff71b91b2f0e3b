"""Users API routes — own profile and live uniqueness checks."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from stagecrew.application.services import account_service
from stagecrew.core.exceptions import BadRequestException, server_errors
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.roles import Principal
from stagecrew.domain.schemas.user import Availability, UserProfile
from stagecrew.interfaces.api.deps import get_principal
from stagecrew.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("/me", response_model=UserProfile)
def get_me(
    principal: Principal = Depends(get_principal),
    repo: UserRepository = Depends(get_user_repository),
):
    with server_errors("Error fetching current user"):
        return account_service.get_current_user_profile(repo, principal.id)


@router.get("/check-email", response_model=Availability)
def check_email(
    email: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    repo: UserRepository = Depends(get_user_repository),
):
    if not email:
        raise BadRequestException("Email is required")

    with server_errors("Internal server error"):
        return Availability(available=account_service.check_unique(repo, "email", email, exclude_id))


@router.get("/check-codice-fiscale", response_model=Availability)
def check_fiscal_code(
    cf: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    repo: UserRepository = Depends(get_user_repository),
):
    if not cf:
        raise BadRequestException("Codice Fiscale is required")

    with server_errors("Internal server error"):
        return Availability(available=account_service.check_unique(repo, "fiscal_code", cf, exclude_id))
