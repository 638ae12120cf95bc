"""
API Dependencies.
"""

from fastapi import Depends, Request

from sueta.application.services.post_service import PostService
from sueta.application.services.user_service import UserService
from sueta.config import Settings
from sueta.domain.repositories.post_repository import PostRepository
from sueta.domain.repositories.user_repository import UserRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_repository(request: Request) -> UserRepository:
    """Get the process-wide user repository."""
    return request.app.state.user_repository


def get_post_repository(request: Request) -> PostRepository:
    """Get the process-wide post repository."""
    return request.app.state.post_repository


def get_user_service(repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo)


def get_post_service(repo: PostRepository = Depends(get_post_repository)) -> PostService:
    return PostService(repo)
