import logging
from typing import Any

from fastapi import (
    APIRouter,
    Body,
    Depends,
    Response,
)

from images_api.adapters.imagekit import (
    DeletionFailed,
    DeletionResult,
    ImageKitClient,
)
from images_api.config.settings import Settings
from images_api.dependencies import get_app_settings, get_imagekit_client
from images_api.schemas import (
    DELETE_FAILURE_MESSAGE,
    DELETE_SUCCESS_MESSAGE,
    AuthenticationParameters,
    DeleteImageRequest,
    DeleteImageResponse,
    DeletionStatus,
)

logger = logging.getLogger(__name__)

UPLOAD_IMAGES_PATH = "/uploadImages"
DELETE_IMAGE_PATH = "/deleteImage"
IMAGE_ROUTE_PATHS = (UPLOAD_IMAGES_PATH, DELETE_IMAGE_PATH)

router = APIRouter()


def to_delete_response(outcome: DeletionResult) -> DeleteImageResponse:
    """Map a deletion result to the `{status, result, message}` body."""
    if isinstance(outcome, DeletionFailed):
        return DeleteImageResponse(
            status=DeletionStatus.FAILED,
            result=outcome.error,
            message=DELETE_FAILURE_MESSAGE,
        )
    return DeleteImageResponse(
        status=DeletionStatus.SUCCESS,
        result=outcome.result,
        message=DELETE_SUCCESS_MESSAGE,
    )


def file_id_from_body(payload: Any) -> Any:
    """`fileId` from a JSON object body, as sent. Any other body yields None."""
    if not isinstance(payload, dict):
        return None
    return DeleteImageRequest.model_validate(payload).file_id


@router.get(UPLOAD_IMAGES_PATH, response_model=AuthenticationParameters)
async def get_upload_auth_parameters(
    imagekit: ImageKitClient = Depends(get_imagekit_client),
) -> AuthenticationParameters:
    """
    Issue signed parameters for a direct browser-to-ImageKit upload.

    A new token is generated on every call; nothing is cached.
    """
    return imagekit.get_authentication_parameters()


@router.post(DELETE_IMAGE_PATH, response_model=DeleteImageResponse)
async def delete_image(
    response: Response,
    payload: Any = Body(None),
    settings: Settings = Depends(get_app_settings),
    imagekit: ImageKitClient = Depends(get_imagekit_client),
) -> DeleteImageResponse:
    """
    Delete an image from ImageKit by file id.

    The file id is not validated here; a missing one is forwarded as null and
    ImageKit's error comes back in the body. Failures are reported through the
    body `status` field and, when configured, through the HTTP status code.

    Args:
        payload: Any JSON body; `fileId` is read when it is an object

    Returns:
        DeleteImageResponse: `{status, result, message}`
    """
    file_id = file_id_from_body(payload)
    outcome = await imagekit.delete_file(file_id)

    if isinstance(outcome, DeletionFailed):
        response.status_code = settings.delete_failure_status_code

    return to_delete_response(outcome)
