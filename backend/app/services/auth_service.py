"""
Authentication service.
Password hashing, credential checks and signed access tokens.
"""
from datetime import timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session, select
import logging

from app.config import settings
from app.core.exceptions import AuthenticationError, InactiveUserError
from app.models.user import User
from app.schemas.auth_schemas import TokenPayload
from app.utils.helpers import utc_now


logger = logging.getLogger("hospital_admin.auth")

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:
    """Authentication service."""

    def __init__(self):
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.issuer = settings.JWT_ISSUER
        self.access_token_expire = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    # ============================================
    # PASSWORD HASHING
    # ============================================

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    # ============================================
    # JWT TOKENS
    # ============================================

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self.access_token_expire.total_seconds())

    def create_access_token(
        self,
        user: User,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """Creates a signed, expiring access token for a user."""
        now = utc_now()
        expire = now + (expires_delta or self.access_token_expire)

        payload = {
            "sub": str(user.id),
            "role": user.access_role.value,
            "employee_id": user.employee_id,
            "iss": self.issuer,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
            "type": "access"
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Optional[TokenPayload]:
        """
        Verifies signature, issuer and expiry of a token.

        Returns:
            The decoded claims, or None if the token is not valid
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer
            )
            return TokenPayload(**payload)
        except (JWTError, PydanticValidationError):
            return None

    # ============================================
    # AUTHENTICATION
    # ============================================

    def authenticate_user(
        self,
        username: str,
        password: str,
        session: Session
    ) -> User:
        """
        Checks credentials and records the login.

        Raises:
            AuthenticationError: unknown user or wrong password
            InactiveUserError: the account is disabled
        """
        user = self.get_user_by_username(username, session)

        if not user or not self.verify_password(password, user.hashed_password):
            logger.warning(f"Failed login for '{username}'")
            raise AuthenticationError()

        if not user.is_active:
            logger.warning(f"Login attempt on inactive account '{username}'")
            raise InactiveUserError()

        user.last_login = utc_now()
        session.add(user)
        session.commit()
        session.refresh(user)

        return user

    def get_user_by_id(self, user_id: int, session: Session) -> Optional[User]:
        return session.get(User, user_id)

    def get_user_by_username(self, username: str, session: Session) -> Optional[User]:
        statement = select(User).where(User.username == username.lower())
        return session.exec(statement).first()


# Global service instance
auth_service = AuthService()
