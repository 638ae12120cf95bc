"""Posts API routes."""

from fastapi import APIRouter, Depends, Response, status

from sueta.application.services.post_service import PostService
from sueta.config import Settings
from sueta.core.exceptions import AppError
from sueta.domain.errors import ValidationFailed
from sueta.domain.schemas.post import CreatePostRequest, PostRead, UpdatePostRequest
from sueta.domain.schemas.user import CreatedResponse
from sueta.interfaces.api.json_body import json_body
from sueta.interfaces.deps import get_app_settings, get_post_service

router = APIRouter(prefix="/api/posts", tags=["Posts"])

VALIDATION_HINT = "input validation failed. please, provide valid values"


@router.get("/{uuid}", response_model=PostRead)
def get_post(
    uuid: str,
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    return PostRead.from_post(service.get_by_id(uuid, timeout=settings.request_timeout))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    body: CreatePostRequest = Depends(json_body(CreatePostRequest, "invalid request body")),
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        post_id = service.create(body, timeout=settings.request_timeout)
    except ValidationFailed as exc:
        raise AppError.from_domain(exc, VALIDATION_HINT) from exc
    return CreatedResponse(id=post_id)


@router.patch("/{uuid}")
def update_post_partially(
    uuid: str,
    body: UpdatePostRequest = Depends(json_body(UpdatePostRequest, "please, fix your request body")),
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    try:
        service.update_partially(uuid, body, timeout=settings.request_timeout)
    except ValidationFailed as exc:
        raise AppError.from_domain(exc, "you have provided invalid values") from exc
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{uuid}")
def delete_post(
    uuid: str,
    service: PostService = Depends(get_post_service),
    settings: Settings = Depends(get_app_settings),
):
    service.delete(uuid, timeout=settings.request_timeout)
    return Response(status_code=status.HTTP_200_OK)
