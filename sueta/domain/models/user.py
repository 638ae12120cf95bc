"""User domain model: maps to a document in the users collection."""

from typing import Optional

from pydantic import BaseModel, Field

from sueta.core.security import hash_password, verify_password


class Role(BaseModel):
    """Role reference kept on the record; no operation reads or writes it."""

    uuid: str = ""
    role: str = ""


class User(BaseModel):
    id: Optional[str] = None
    email: str
    username: str
    password: str  # bcrypt hash once stored
    verified: bool = False
    registered_at: str
    role: Role = Field(default_factory=Role)

    def hash_password(self) -> None:
        """Replace the plaintext password with its hash."""
        self.password = hash_password(self.password)

    def verify_password(self, plain_password: str) -> bool:
        return verify_password(plain_password, self.password)

    def __repr__(self):
        return f"<User {self.email}>"
