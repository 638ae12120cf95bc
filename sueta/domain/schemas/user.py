"""Pydantic schemas for User requests and responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sueta.domain import validation as v
from sueta.domain.errors import ValidationErrors
from sueta.domain.models.user import Role, User

# Request bodies are decoded strictly: camelCase keys only, no unknown keys,
# no type coercion.
REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class CreateUserRequest(BaseModel):
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    repeat_password: Optional[str] = None

    model_config = REQUEST_CONFIG

    def validation_errors(self) -> ValidationErrors:
        return v.collect_errors([
            ("email", self.email, (v.required, v.email)),
            ("username", self.username, (v.required, v.length(3, 20), v.alphanumeric)),
            ("password", self.password, (v.required, v.length(6, 24), v.alphanumeric)),
            ("repeatPassword", self.repeat_password, (v.required, v.length(6, 24), v.alphanumeric)),
        ])


class UpdateUserRequest(BaseModel):
    """Partial update; ``None`` means leave the stored value unchanged."""

    email: Optional[str] = None
    username: Optional[str] = None
    old_password: Optional[str] = None
    new_password: Optional[str] = None

    model_config = REQUEST_CONFIG

    def validation_errors(self) -> ValidationErrors:
        return v.collect_errors([
            ("email", self.email, (v.email,)),
            ("username", self.username, (v.length(3, 20), v.alphanumeric)),
            ("oldPassword", self.old_password, (v.required, v.alphanumeric)),
            ("newPassword", self.new_password, (v.length(6, 24), v.alphanumeric)),
        ])


class UserRead(BaseModel):
    uuid: str
    email: str
    username: str
    verified: bool
    registered_at: str
    role: Role

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(
            uuid=user.id or "",
            email=user.email,
            username=user.username,
            verified=user.verified,
            registered_at=user.registered_at,
            role=user.role,
        )


class CreatedResponse(BaseModel):
    id: str
