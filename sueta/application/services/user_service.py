"""User service: account lifecycle on top of the user repository.

The service is stateless; one instance can be shared by concurrent
requests. Storage failures are narrowed into :mod:`sueta.domain.errors`
here and never escape as repository exceptions.
"""

from typing import Optional

import structlog

from sueta.domain.errors import (
    EmailTaken,
    Internal,
    InvalidId,
    NotFound,
    PasswordsMismatch,
    WrongPassword,
)
from sueta.domain.models.base import utc_date
from sueta.domain.models.user import User
from sueta.domain.repositories.base import (
    Deadline,
    DuplicateRecord,
    InvalidRecordId,
    RecordNotFound,
    RepositoryError,
)
from sueta.domain.repositories.user_repository import UserRepository
from sueta.domain.schemas.user import CreateUserRequest, UpdateUserRequest
from sueta.domain.validation import raise_for_errors

logger = structlog.get_logger(__name__)


class UserService:
    """Create, read, update and delete user accounts."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create(self, request: CreateUserRequest, *, timeout: Optional[float] = None) -> str:
        """Register a new user and return its id.

        Raises ValidationFailed, PasswordsMismatch, EmailTaken or Internal.
        """
        raise_for_errors(request.validation_errors())
        if request.password != request.repeat_password:
            raise PasswordsMismatch()

        deadline = Deadline(timeout)
        try:
            self.repository.find_by_email(request.email, timeout=deadline.remaining())
        except RecordNotFound:
            pass
        except RepositoryError as exc:
            raise Internal(f"failed to look up user by email: {exc}") from exc
        else:
            raise EmailTaken()

        user = User(
            email=request.email,
            username=request.username,
            password=request.password,
            verified=False,
            registered_at=utc_date(),
        )
        try:
            user.hash_password()
        except ValueError as exc:
            logger.warning("Could not hash user password", error=str(exc))
            raise Internal(f"could not hash password: {exc}") from exc

        try:
            user_id = self.repository.create(user, timeout=deadline.remaining())
        except DuplicateRecord as exc:
            # Lost the race against a concurrent create with the same email.
            raise EmailTaken() from exc
        except RepositoryError as exc:
            raise Internal(f"cannot create user: {exc}") from exc

        logger.info("User created", user_id=user_id)
        return user_id

    def get_by_email_and_password(
        self, email: str, password: str, *, timeout: Optional[float] = None
    ) -> User:
        """Return the user owning ``email`` if ``password`` matches.

        The email is checked first: an unknown email is NotFound whatever
        the password.
        """
        try:
            user = self.repository.find_by_email(email, timeout=timeout)
        except RecordNotFound as exc:
            raise NotFound() from exc
        except RepositoryError as exc:
            logger.warning("Error occurred on finding user by email", error=str(exc))
            raise Internal(f"failed to find user by email: {exc}") from exc

        if not user.verify_password(password):
            raise WrongPassword()
        return user

    def get_by_id(self, user_id: str, *, timeout: Optional[float] = None) -> User:
        try:
            return self.repository.find_by_id(user_id, timeout=timeout)
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except RepositoryError as exc:
            logger.warning("Failed to find user by uuid", user_id=user_id, error=str(exc))
            raise Internal(f"failed to find user by uuid: {exc}") from exc

    def update_partially(
        self, user_id: str, request: UpdateUserRequest, *, timeout: Optional[float] = None
    ) -> None:
        """Apply the fields present on ``request`` to the user ``user_id``.

        ``old_password`` must match the stored password. The request is
        validated before anything is fetched, so an invalid value never
        reaches storage.
        """
        raise_for_errors(request.validation_errors())

        deadline = Deadline(timeout)
        user = self.get_by_id(user_id, timeout=deadline.remaining())
        if not user.verify_password(request.old_password):
            raise WrongPassword()

        if request.new_password is not None:
            user.password = request.new_password
            try:
                user.hash_password()
            except ValueError as exc:
                logger.warning("Failed to hash password", user_id=user.id, error=str(exc))
                raise Internal(f"could not hash password: {exc}") from exc
        if request.email is not None:
            user.email = request.email
        if request.username is not None:
            user.username = request.username

        try:
            self.repository.update_partially(user, timeout=deadline.remaining())
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except DuplicateRecord as exc:
            raise EmailTaken() from exc
        except RepositoryError as exc:
            logger.warning("Failed to update the user", user_id=user.id, error=str(exc))
            raise Internal(f"failed to update user: {exc}") from exc

        logger.info("User updated", user_id=user.id)

    def delete(self, user_id: str, *, timeout: Optional[float] = None) -> None:
        try:
            self.repository.delete(user_id, timeout=timeout)
        except RecordNotFound as exc:
            raise NotFound() from exc
        except InvalidRecordId as exc:
            raise InvalidId() from exc
        except RepositoryError as exc:
            logger.warning("Failed to delete the user", user_id=user_id, error=str(exc))
            raise Internal(f"failed to delete user: {exc}") from exc

        logger.info("User deleted", user_id=user_id)
