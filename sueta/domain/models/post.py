"""Post domain model: maps to a document in the posts collection."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Comment(BaseModel):
    id: str = ""
    content: str = ""
    user_id: str = ""
    verified: bool = False
    created_at: str = ""
    updated_at: str = ""


class Post(BaseModel):
    id: Optional[str] = None
    title: str
    content: str
    user_id: str
    created_at: str
    updated_at: str
    comments: List[Comment] = Field(default_factory=list)

    def __repr__(self):
        return f"<Post {self.title!r}>"
