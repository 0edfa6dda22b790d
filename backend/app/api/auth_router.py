"""
Authentication router.
Login and current-user endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.core.database import get_session
from app.core.auth_dependencies import get_current_user
from app.core.exceptions import AuthenticationError, InactiveUserError
from app.models.employee import Employee
from app.models.user import User
from app.services.auth_service import auth_service
from app.schemas.auth_schemas import LoginRequest, LoginResponse, UserResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])


def build_user_response(user: User, session: Session) -> UserResponse:
    """Combines the account with its employee record."""
    employee = session.get(Employee, user.employee_id) if user.employee_id else None

    return UserResponse(
        id=user.employee_id,
        user_id=user.id,
        email=user.username,
        name=employee.full_name if employee else "User",
        role=user.access_role,
        emp_id_display=employee.emp_id_display if employee else None,
        department_id=employee.department_id if employee else None,
        last_login=user.last_login,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    session: Session = Depends(get_session)
):
    """
    Signs in with email and password.
    Returns a signed access token and the user profile.
    """
    try:
        user = auth_service.authenticate_user(data.email, data.password, session)
    except InactiveUserError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

    return LoginResponse(
        token=auth_service.create_access_token(user),
        expires_in=auth_service.access_token_expire_seconds,
        user=build_user_response(user, session),
    )


@router.get("/me", response_model=UserResponse)
def read_current_user(
    current_user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Returns the signed-in user."""
    return build_user_response(current_user, session)
