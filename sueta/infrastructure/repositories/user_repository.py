"""
MongoDB Implementation of User Repository.
"""

from typing import Optional

import structlog
from pymongo import ASCENDING
from pymongo.collection import Collection

from sueta.domain.models.user import User
from sueta.domain.repositories.user_repository import UserRepository
from sueta.infrastructure.repositories.base_repository import MongoRepository

logger = structlog.get_logger(__name__)


class MongoUserRepository(MongoRepository[User], UserRepository):
    """User repository implementation using MongoDB."""

    def __init__(self, collection: Collection):
        super().__init__(collection, User)

    def ensure_indexes(self) -> None:
        """Create the unique email index that backs email uniqueness."""
        with self._operation("ensure_indexes", None):
            self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        logger.info("User indexes ensured", collection=self.collection.name)

    def find_by_email(self, email: str, *, timeout: Optional[float] = None) -> User:
        return self._find_one("find_by_email", {"email": email}, timeout)
