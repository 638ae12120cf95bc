"""Users API routes: register, look up, update and delete accounts."""

from fastapi import APIRouter, Depends, Response, status

from sueta.application.services.user_service import UserService
from sueta.config import Settings
from sueta.core.exceptions import AppError, BadRequestError
from sueta.domain.errors import ValidationFailed, WrongPassword
from sueta.domain.schemas.user import (
    CreatedResponse,
    CreateUserRequest,
    UpdateUserRequest,
    UserRead,
)
from sueta.interfaces.api.json_body import json_body
from sueta.interfaces.deps import get_app_settings, get_user_service

router = APIRouter(prefix="/api/users", tags=["Users"])

CREATE_VALIDATION_HINT = "input validation failed. please, provide valid values"
UPDATE_VALIDATION_HINT = "you have provided invalid values"


@router.get("/{uuid}", response_model=UserRead)
def get_user(
    uuid: str,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    user = service.get_by_id(uuid, timeout=settings.request_timeout)
    return UserRead.from_user(user)


@router.get("", response_model=UserRead)
def get_user_by_email_and_password(
    email: str = "",
    password: str = "",
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    if not email or not password:
        raise BadRequestError("empty email or password", "email and password must be provided")

    user = service.get_by_email_and_password(email, password, timeout=settings.request_timeout)
    return UserRead.from_user(user)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserRequest = Depends(json_body(CreateUserRequest, "invalid request body")),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        user_id = service.create(body, timeout=settings.request_timeout)
    except ValidationFailed as exc:
        raise AppError.from_domain(exc, CREATE_VALIDATION_HINT) from exc
    return CreatedResponse(id=user_id)


@router.patch("/{uuid}")
def update_user_partially(
    uuid: str,
    body: UpdateUserRequest = Depends(json_body(UpdateUserRequest, "please, fix your request body")),
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        service.update_partially(uuid, body, timeout=settings.request_timeout)
    except ValidationFailed as exc:
        raise AppError.from_domain(exc, UPDATE_VALIDATION_HINT) from exc
    except WrongPassword as exc:
        raise AppError.from_domain(exc, "you entered wrong password") from exc
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{uuid}")
def delete_user(
    uuid: str,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    service.delete(uuid, timeout=settings.request_timeout)
    return Response(status_code=status.HTTP_200_OK)
