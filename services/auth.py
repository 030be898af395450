"""
Email/password accounts stored in the ``users`` table.
"""

from typing import Optional

from config import settings
from db import SupabaseClient, get_db_client
from models.user import UserCreate
from services.session import SessionContext
from utils.exceptions import AuthenticationError, ValidationError
from utils.logging_config import setup_logging
from utils.security import hash_password, verify_password
from utils.validation import validate_email

logger = setup_logging(name=__name__, log_file="auth.log")

INVALID_CREDENTIALS = "Invalid email or password."


class AuthService:
    """Signup, login and logout for the custom login."""

    def __init__(self, db: Optional[SupabaseClient] = None):
        self.db = db or get_db_client()

    async def signup(
        self,
        email: str,
        password: str,
        name: str = "",
        business_name: str = "",
        locale: str = "en",
    ) -> SessionContext:
        """
        Register a new account and start a session for it.

        Raises:
            ValidationError: Malformed email or too short password
            AuthenticationError: Email already registered
        """
        email = (email or "").strip()
        if not validate_email(email):
            raise ValidationError("Please enter a valid email address.")

        existing = await self.db.get_user_by_email(email)
        if existing:
            logger.info("Signup rejected: email already registered")
            raise AuthenticationError("This email is already registered.")

        if len(password or "") < settings.min_password_length:
            raise ValidationError(
                f"Password should be at least {settings.min_password_length} characters."
            )

        user_data = UserCreate(
            email=email,
            password_hash=hash_password(password),
            name=name,
            business_name=business_name,
        )
        user_id = await self.db.create_user(user_data)
        logger.info(f"Signup complete for user {user_id}")

        return SessionContext(
            user_id=user_id,
            email=user_data.email,
            name=user_data.name,
            business_name=user_data.business_name,
            locale=locale,
        )

    async def login(self, email: str, password: str, locale: str = "en") -> SessionContext:
        """
        Check credentials and start a session.

        Raises:
            AuthenticationError: Unknown email or wrong password (same message)
        """
        user = await self.db.get_user_by_email((email or "").strip())
        if user is None or not verify_password(password or "", user.password_hash):
            logger.info("Login failed")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return SessionContext.for_user(user, locale=locale)

    def logout(self, context: SessionContext) -> None:
        context.close()
        logger.info(f"User {context.user_id} logged out")
