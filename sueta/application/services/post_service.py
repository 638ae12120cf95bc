"""Post service: post lifecycle on top of the post repository."""

from typing import Optional

import structlog

from sueta.domain.errors import Internal, InvalidId, NotFound
from sueta.domain.models.base import utc_date
from sueta.domain.models.post import Post
from sueta.domain.repositories.base import Deadline, InvalidRecordId, RecordNotFound, RepositoryError
from sueta.domain.repositories.post_repository import PostRepository
from sueta.domain.schemas.post import CreatePostRequest, UpdatePostRequest
from sueta.domain.validation import raise_for_errors

logger = structlog.get_logger(__name__)


class PostService:
    def __init__(self, repository: PostRepository):
        self.repository = repository

    def create(self, request: CreatePostRequest, *, timeout: Optional[float] = None) -> str:
        raise_for_errors(request.validation_errors())

        today = utc_date()
        post = Post(
            title=request.title,
            content=request.content,
            user_id=request.user_id,
            created_at=today,
            updated_at=today,
        )
        try:
            post_id = self.repository.create(post, timeout=timeout)
        except RepositoryError as exc:
            raise Internal(f"cannot create post: {exc}") from exc

        logger.info("Post created", post_id=post_id)
        return post_id

    def get_by_id(self, post_id: str, *, timeout: Optional[float] = None) -> Post:
        try:
            return self.repository.find_by_id(post_id, timeout=timeout)
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except RepositoryError as exc:
            logger.warning("Failed to find post by uuid", post_id=post_id, error=str(exc))
            raise Internal(f"failed to find post by uuid: {exc}") from exc

    def update_partially(
        self, post_id: str, request: UpdatePostRequest, *, timeout: Optional[float] = None
    ) -> None:
        raise_for_errors(request.validation_errors())

        deadline = Deadline(timeout)
        post = self.get_by_id(post_id, timeout=deadline.remaining())
        if request.title is not None:
            post.title = request.title
        if request.content is not None:
            post.content = request.content
        if request.user_id is not None:
            post.user_id = request.user_id
        post.updated_at = utc_date()

        try:
            self.repository.update_partially(post, timeout=deadline.remaining())
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except RepositoryError as exc:
            logger.warning("Failed to update the post", post_id=post.id, error=str(exc))
            raise Internal(f"failed to update post: {exc}") from exc

    def delete(self, post_id: str, *, timeout: Optional[float] = None) -> None:
        try:
            self.repository.delete(post_id, timeout=timeout)
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except RepositoryError as exc:
            logger.warning("Failed to delete the post", post_id=post_id, error=str(exc))
            raise Internal(f"failed to delete post: {exc}") from exc
