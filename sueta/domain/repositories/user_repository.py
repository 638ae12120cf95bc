"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import Optional

from sueta.domain.models.user import User
from sueta.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def find_by_email(self, email: str, *, timeout: Optional[float] = None) -> User:
        """Get the user registered with ``email``."""
        ...
