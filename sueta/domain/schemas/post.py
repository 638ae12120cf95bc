"""Pydantic schemas for Post requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sueta.domain import validation as v
from sueta.domain.errors import ValidationErrors
from sueta.domain.models.post import Post
from sueta.domain.schemas.user import REQUEST_CONFIG

TITLE_RULES = (v.ascii_only, v.length(3, 200))
CONTENT_RULES = (v.ascii_only, v.length(10, 5000))


class CreatePostRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[str] = None

    model_config = REQUEST_CONFIG

    def validation_errors(self) -> ValidationErrors:
        return v.collect_errors([
            ("title", self.title, (v.required, *TITLE_RULES)),
            ("content", self.content, (v.required, *CONTENT_RULES)),
            ("userId", self.user_id, (v.required,)),
        ])


class UpdatePostRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[str] = None

    model_config = REQUEST_CONFIG

    def validation_errors(self) -> ValidationErrors:
        return v.collect_errors([
            ("title", self.title, TITLE_RULES),
            ("content", self.content, CONTENT_RULES),
        ])


class CommentRead(BaseModel):
    id: str
    content: str
    user_id: str
    verified: bool
    created_at: str
    updated_at: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostRead(BaseModel):
    id: str
    title: str
    content: str
    user_id: str
    created_at: str
    updated_at: str
    comments: List[CommentRead]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_post(cls, post: Post) -> "PostRead":
        return cls(
            id=post.id or "",
            title=post.title,
            content=post.content,
            user_id=post.user_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
            comments=[CommentRead.model_validate(c.model_dump()) for c in post.comments],
        )
