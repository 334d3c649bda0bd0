from textwrap import dedent
import logging
from typing import Optional

import pydantic
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware

from images_api.adapters.imagekit import ImageKitClient
from images_api.config.settings import Settings, get_settings
from images_api.errors import (
    handle_broad_exceptions,
    handle_pydantic_validation_errors,
)
from images_api.middleware import BodySizeLimitMiddleware, pin_allowed_origin
from images_api.routers.health import router as health_router
from images_api.routers.images import IMAGE_ROUTE_PATHS, router as images_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    imagekit: Optional[ImageKitClient] = None,
) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or get_settings()
    imagekit = imagekit or ImageKitClient.from_settings(settings)

    app = FastAPI(
        title="Images API",
        summary="Sign ImageKit uploads and delete ImageKit images",
        version="v1",
        description=dedent(
            """\
        | Endpoint | Notes |
        | --- | --- |
        | `GET /uploadImages` | Signed `token`, `expire`, `signature` for a direct upload |
        | `POST /deleteImage` | Delete by `fileId`; check the body `status` field for the outcome |
        """
        ),
        docs_url="/",  # its easier to find the docs when they live on the base url
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.state.settings = settings
    app.state.imagekit = imagekit

    app.include_router(images_router, tags=["images"])
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )

    # Middleware added last runs first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.middleware("http")(pin_allowed_origin(IMAGE_ROUTE_PATHS, settings.route_allowed_origin))
    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"
