"""
MongoDB Implementation of Post Repository.
"""

from pymongo.collection import Collection

from sueta.domain.models.post import Post
from sueta.domain.repositories.post_repository import PostRepository
from sueta.infrastructure.repositories.base_repository import MongoRepository


class MongoPostRepository(MongoRepository[Post], PostRepository):
    """Post repository implementation using MongoDB."""

    def __init__(self, collection: Collection):
        super().__init__(collection, Post)
