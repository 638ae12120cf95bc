from __future__ import annotations

from typing import Dict, Optional

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from sueta.application.services.user_service import UserService
from sueta.config import Settings
from sueta.domain.models.user import User
from sueta.domain.repositories.base import (
    DuplicateRecord,
    InvalidRecordId,
    RecordNotFound,
    StorageError,
)
from sueta.domain.schemas.user import CreateUserRequest
from sueta.infrastructure.repositories.post_repository import MongoPostRepository
from sueta.infrastructure.repositories.user_repository import MongoUserRepository
from sueta.main import create_app


class InMemoryUserRepository:
    """Dictionary-backed user repository with a unique email constraint."""

    def __init__(self) -> None:
        self.records: Dict[str, User] = {}
        self.timeouts: list = []

    def _check_id(self, id: Optional[str]) -> None:
        if not isinstance(id, str) or not ObjectId.is_valid(id):
            raise InvalidRecordId(repr(id))

    def _email_owner(self, email: str) -> Optional[str]:
        for record_id, record in self.records.items():
            if record.email == email:
                return record_id
        return None

    def create(self, obj: User, *, timeout: Optional[float] = None) -> str:
        self.timeouts.append(timeout)
        if self._email_owner(obj.email) is not None:
            raise DuplicateRecord(obj.email)
        record_id = str(ObjectId())
        self.records[record_id] = obj.model_copy(update={"id": record_id}, deep=True)
        return record_id

    def find_by_email(self, email: str, *, timeout: Optional[float] = None) -> User:
        self.timeouts.append(timeout)
        record_id = self._email_owner(email)
        if record_id is None:
            raise RecordNotFound(email)
        return self.records[record_id].model_copy(deep=True)

    def find_by_id(self, id: str, *, timeout: Optional[float] = None) -> User:
        self.timeouts.append(timeout)
        self._check_id(id)
        if id not in self.records:
            raise RecordNotFound(id)
        return self.records[id].model_copy(deep=True)

    def update_partially(self, obj: User, *, timeout: Optional[float] = None) -> None:
        self.timeouts.append(timeout)
        self._check_id(obj.id)
        if obj.id not in self.records:
            raise RecordNotFound(obj.id)
        owner = self._email_owner(obj.email)
        if owner is not None and owner != obj.id:
            raise DuplicateRecord(obj.email)
        self.records[obj.id] = obj.model_copy(deep=True)

    def delete(self, id: str, *, timeout: Optional[float] = None) -> None:
        self.timeouts.append(timeout)
        self._check_id(id)
        if self.records.pop(id, None) is None:
            raise RecordNotFound(id)


class UnavailableUserRepository:
    """Every call fails as if the store were unreachable."""

    def _fail(self, *args, **kwargs):
        raise StorageError("connection refused")

    create = find_by_email = find_by_id = update_partially = delete = _fail


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        MONGO_URL="mongodb://localhost:27017",
        MONGO_DATABASE="sueta_test",
        MONGO_COLLECTION="users",
        MONGO_POSTS_COLLECTION="posts",
        HTTP_WRITE_TIMEOUT=3,
    )


@pytest.fixture()
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture()
def user_repository(mongo_client, settings) -> MongoUserRepository:
    repository = MongoUserRepository(mongo_client[settings.MONGO_DATABASE][settings.MONGO_COLLECTION])
    repository.ensure_indexes()
    return repository


@pytest.fixture()
def post_repository(mongo_client, settings) -> MongoPostRepository:
    return MongoPostRepository(mongo_client[settings.MONGO_DATABASE][settings.MONGO_POSTS_COLLECTION])


@pytest.fixture()
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def user_service(memory_repository) -> UserService:
    return UserService(memory_repository)


@pytest.fixture()
def app(settings, mongo_client):
    return create_app(settings, mongo_client=mongo_client)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def create_request(
    email: str = "test@mail.com",
    username: str = "test",
    password: str = "qwerty",
    repeat_password: Optional[str] = None,
) -> CreateUserRequest:
    return CreateUserRequest.model_validate(
        {
            "email": email,
            "username": username,
            "password": password,
            "repeatPassword": password if repeat_password is None else repeat_password,
        }
    )
