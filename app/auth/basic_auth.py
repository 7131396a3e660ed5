# app/auth/basic_auth.py
"""
HTTP Basic authentication and role checks as FastAPI dependencies.
Set AUTH_ENABLED=false in .env to run without credentials (local dev only).
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session
from app.auth.passwords_handler import verify_password
from app.auth.user_details import UserDetails, load_user_by_username
from app.config import settings
from app.database import get_db
from app.services.exceptions import UserNotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"

security = HTTPBasic(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def get_current_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> UserDetails:
    """Resolve the Basic credentials to a UserDetails, or fail with 401."""
    if not settings.AUTH_ENABLED:
        return UserDetails(username="anonymous", password_hash="", roles={ROLE_ADMIN, ROLE_USER})

    if credentials is None:
        raise _unauthorized("Missing credentials")

    try:
        user = load_user_by_username(db, credentials.username)
    except UserNotFoundError:
        logger.warning(f"Login attempt for unknown user '{credentials.username}'")
        raise _unauthorized("Invalid username or password")

    if not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Bad password for user '{credentials.username}'")
        raise _unauthorized("Invalid username or password")
    return user


def require_roles(*roles: str):
    """Dependency factory: the caller must hold at least one of `roles`."""
    def checker(user: UserDetails = Depends(get_current_user)) -> UserDetails:
        if not user.has_any_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires one of: {', '.join(roles)}",
            )
        return user
    return checker
