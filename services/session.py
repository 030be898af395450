"""
Per-login session context.

The signed-in account and display locale are carried in an explicit object
handed to every service call instead of living in module globals. A context
is created by ``AuthService.login``/``signup`` and closed by
``AuthService.logout``; services refuse closed contexts.
"""

from pydantic import BaseModel

from models.user import User
from utils.exceptions import AuthenticationError


class SessionContext(BaseModel):
    """The signed-in account for one browser session."""

    user_id: str
    email: str
    name: str = ""
    business_name: str = ""
    locale: str = "en"
    active: bool = True

    @classmethod
    def for_user(cls, user: User, locale: str = "en") -> "SessionContext":
        return cls(
            user_id=user.id,
            email=user.email,
            name=user.name,
            business_name=user.business_name,
            locale=locale,
        )

    @property
    def seller_name(self) -> str:
        return self.name or self.business_name

    def require_user_id(self) -> str:
        """
        Account ID for scoping storage queries.

        Raises:
            AuthenticationError: If the session has been logged out
        """
        if not self.active:
            raise AuthenticationError("Session has ended. Please log in again.")
        return self.user_id

    def close(self) -> None:
        self.active = False
