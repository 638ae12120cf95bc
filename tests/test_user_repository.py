import pytest

from sueta.domain.models.user import User
from sueta.domain.repositories.base import (
    DuplicateRecord,
    InvalidRecordId,
    RecordNotFound,
    StorageError,
)
from sueta.infrastructure.repositories import base_repository

MISSING_ID = "62056f8cf21b83383a5ae7fa"


def make_user(email="test1@mail.com", username="test1") -> User:
    return User(email=email, username=username, password="hash", registered_at="2022/02/10")


def test_create_and_find(user_repository):
    user_id = user_repository.create(make_user())

    by_id = user_repository.find_by_id(user_id)
    by_email = user_repository.find_by_email("test1@mail.com")

    assert by_id == by_email
    assert by_id.id == user_id
    assert len(user_id) == 24
    assert by_id.username == "test1"
    assert by_id.verified is False


def test_stored_document_uses_object_id(user_repository):
    user_id = user_repository.create(make_user())

    document = user_repository.collection.find_one({})
    assert str(document["_id"]) == user_id
    assert "id" not in document


def test_duplicate_email_is_rejected(user_repository):
    user_repository.create(make_user())

    with pytest.raises(DuplicateRecord):
        user_repository.create(make_user(username="other"))


def test_find_missing(user_repository):
    with pytest.raises(RecordNotFound):
        user_repository.find_by_email("nobody@mail.com")
    with pytest.raises(RecordNotFound):
        user_repository.find_by_id(MISSING_ID)


@pytest.mark.parametrize("bad_id", ["invaliduuid", "", "zz056f8cf21b83383a5ae7fa", None])
def test_invalid_ids(user_repository, bad_id):
    with pytest.raises(InvalidRecordId):
        user_repository.find_by_id(bad_id)
    with pytest.raises(InvalidRecordId):
        user_repository.delete(bad_id)
    with pytest.raises(InvalidRecordId):
        user_repository.update_partially(make_user().model_copy(update={"id": bad_id}))


def test_update_partially(user_repository):
    user_id = user_repository.create(make_user())
    user = user_repository.find_by_id(user_id)
    user.username = "renamed"

    user_repository.update_partially(user)

    assert user_repository.find_by_id(user_id).username == "renamed"


def test_update_missing_record(user_repository):
    with pytest.raises(RecordNotFound):
        user_repository.update_partially(make_user().model_copy(update={"id": MISSING_ID}))


def test_update_to_taken_email(user_repository):
    user_repository.create(make_user())
    second = user_repository.find_by_id(user_repository.create(make_user("test2@mail.com", "test2")))
    second.email = "test1@mail.com"

    with pytest.raises(DuplicateRecord):
        user_repository.update_partially(second)


def test_delete(user_repository):
    user_id = user_repository.create(make_user())

    user_repository.delete(user_id)

    with pytest.raises(RecordNotFound):
        user_repository.delete(user_id)
    with pytest.raises(RecordNotFound):
        user_repository.find_by_id(user_id)


def test_calls_are_bounded_by_the_smaller_timeout(user_repository, monkeypatch):
    limits = []
    real_timeout = base_repository.pymongo.timeout

    def recording_timeout(limit):
        limits.append(limit)
        return real_timeout(limit)

    monkeypatch.setattr(base_repository.pymongo, "timeout", recording_timeout)

    with pytest.raises(RecordNotFound):
        user_repository.find_by_email("nobody@mail.com", timeout=30)
    with pytest.raises(RecordNotFound):
        user_repository.find_by_email("nobody@mail.com", timeout=1.5)
    with pytest.raises(RecordNotFound):
        user_repository.find_by_email("nobody@mail.com")

    assert limits == [base_repository.OPERATION_TIMEOUT, 1.5, base_repository.OPERATION_TIMEOUT]


def test_exhausted_budget_fails_without_calling_the_store(user_repository, monkeypatch):
    def unreachable(limit):
        raise AssertionError("store must not be called")

    monkeypatch.setattr(base_repository.pymongo, "timeout", unreachable)

    with pytest.raises(StorageError, match="deadline exceeded"):
        user_repository.find_by_email("nobody@mail.com", timeout=0.0)
