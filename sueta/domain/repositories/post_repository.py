"""
Post Repository Interface.
"""

from sueta.domain.models.post import Post
from sueta.domain.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Interface for Post operations."""
