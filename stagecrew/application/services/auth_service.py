"""Auth service — session tokens and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from stagecrew.config import get_settings
from stagecrew.core.exceptions import EntityNotFoundException, UnauthorizedException
from stagecrew.domain.repositories.user_repository import UserRepository
from stagecrew.domain.roles import Principal, Role

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def check_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(principal: Principal, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    claims = {
        "sub": str(principal.id),
        "role": principal.role.value,
        "is_worker": principal.is_worker,
        "exp": expire,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[Principal]:
    """Principal carried by a token, or None when the token is unusable."""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None

    try:
        return Principal(
            id=int(payload["sub"]),
            role=Role(payload["role"]),
            is_worker=bool(payload.get("is_worker", False)),
        )
    except (KeyError, TypeError, ValueError):
        return None


def verify_password(repo: UserRepository, user_id: int, candidate: str) -> None:
    """Re-confirm the caller's identity. Does not touch session state."""
    user = repo.get_by_id(user_id)
    if user is None or not user.password_hash:
        raise EntityNotFoundException("User not found")

    if not check_password(candidate, user.password_hash):
        logger.warning("Password re-verification failed", user_id=user_id)
        raise UnauthorizedException("Incorrect password")
