"""
Authentication dependencies for FastAPI.
Provide the current user and role guards for protected endpoints.
"""
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.database import get_session
from app.models.enums import RoleEnum
from app.models.user import User
from app.services.auth_service import auth_service


# Bearer security scheme
security = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """401 with a bearer challenge."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenError(HTTPException):
    """403 for an authenticated user lacking the role."""
    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: Session = Depends(get_session)
) -> User:
    """
    Returns the authenticated user.
    Raises 401 if the token is missing, invalid or expired.
    """
    if not credentials:
        raise AuthError("Unauthorized - missing token")

    payload = auth_service.decode_token(credentials.credentials)

    if not payload or payload.type != "access":
        raise AuthError("Unauthorized - invalid or expired token")

    user = auth_service.get_user_by_id(int(payload.sub), session)

    if not user:
        raise AuthError("User not found")

    if not user.is_active:
        raise AuthError("Account is inactive")

    return user


def require_roles(*roles: RoleEnum):
    """
    Builds a dependency that lets only the given roles through.

    Usage:
        @router.get("/hr", dependencies=[Depends(require_roles(RoleEnum.HR))])
    """
    async def role_checker(
        current_user: User = Depends(get_current_user)
    ) -> User:
        if current_user.access_role not in roles:
            raise ForbiddenError(
                f"Required role: {', '.join(r.value for r in roles)}"
            )
        return current_user

    return role_checker
