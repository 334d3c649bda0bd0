from fastapi import Request

from images_api.adapters.imagekit import ImageKitClient
from images_api.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_imagekit_client(request: Request) -> ImageKitClient:
    """ImageKit client built once in `create_app`."""
    return request.app.state.imagekit
