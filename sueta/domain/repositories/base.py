"""
Base Repository Interface.
Defines the standard contract for document storage and the errors it raises.

Every operation accepts ``timeout``: the caller's remaining budget in
seconds. Implementations must not exceed it. Callers making several store
calls for one request share a single :class:`Deadline` between them.
"""

from time import monotonic
from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


class Deadline:
    """Time budget shared by the store calls of one operation."""

    def __init__(self, timeout: Optional[float]):
        self.expires_at = None if timeout is None else monotonic() + timeout

    def remaining(self) -> Optional[float]:
        """Seconds left, never negative; ``None`` when unbounded."""
        if self.expires_at is None:
            return None
        return max(self.expires_at - monotonic(), 0.0)


class RepositoryError(Exception):
    """Base class for storage failures."""


class RecordNotFound(RepositoryError):
    """No record matched the query."""


class InvalidRecordId(RepositoryError):
    """The id is not a well-formed storage key."""


class DuplicateRecord(RepositoryError):
    """A unique constraint rejected the write."""


class StorageError(RepositoryError):
    """The store could not be reached or the call timed out."""


class BaseRepository(Protocol[T]):
    """Interface for id-addressed CRUD operations."""

    def create(self, obj: T, *, timeout: Optional[float] = None) -> str:
        """Insert a record and return its new id."""
        ...

    def find_by_id(self, id: str, *, timeout: Optional[float] = None) -> T:
        """Get a single record by id."""
        ...

    def update_partially(self, obj: T, *, timeout: Optional[float] = None) -> None:
        """Overwrite the stored fields of an existing record."""
        ...

    def delete(self, id: str, *, timeout: Optional[float] = None) -> None:
        """Delete a record by id."""
        ...
