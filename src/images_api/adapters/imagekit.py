"""
ImageKit adapter.

Wraps the `imagekitio` SDK behind the two calls the API needs: signing
upload parameters and deleting a file. Deletion is turned into an explicit
success/failure result instead of letting SDK exceptions escape.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from fastapi.concurrency import run_in_threadpool
from imagekitio import ImageKit

from images_api.config.settings import Settings
from images_api.schemas import AuthenticationParameters
from images_api.utils.decorators import async_log_execution_time, log_execution_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletionSucceeded:
    """ImageKit accepted the deletion."""
    file_id: Any
    result: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeletionFailed:
    """ImageKit rejected the deletion, or the call itself failed."""
    file_id: Any
    error: Dict[str, Any] = field(default_factory=dict)


DeletionResult = Union[DeletionSucceeded, DeletionFailed]


def _result_to_dict(result: Any) -> Dict[str, Any]:
    """Flatten an SDK result object into JSON-friendly data."""
    if result is None:
        return {}
    if isinstance(result, dict):
        return result
    metadata = getattr(result, "response_metadata", None)
    if metadata is None:
        return {}
    return {
        "http_status_code": getattr(metadata, "http_status_code", None),
        "raw": getattr(metadata, "raw", None),
    }


def _error_to_dict(err: Exception) -> Dict[str, Any]:
    """Describe an SDK exception the way ImageKit reports errors: name, message, help."""
    # Argument checks in the SDK raise e.g. TypeError({"message": ..., "help": ...}).
    payload = err.args[0] if err.args and isinstance(err.args[0], dict) else {}
    message = getattr(err, "message", None) or payload.get("message") or str(err)
    response_help = getattr(err, "response_help", None)
    if response_help is None:
        response_help = payload.get("help")
    return {
        "name": type(err).__name__,
        "message": message,
        "help": response_help,
    }


class ImageKitClient:
    """Configured handle to the ImageKit service."""

    def __init__(self, sdk: Any):
        self._sdk = sdk

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageKitClient":
        sdk = ImageKit(
            private_key=settings.imagekit_private_key,
            public_key=settings.imagekit_public_key,
            url_endpoint=settings.imagekit_url_endpoint,
        )
        logger.info("ImageKit client configured for %s", settings.imagekit_url_endpoint)
        return cls(sdk)

    @log_execution_time
    def get_authentication_parameters(self) -> AuthenticationParameters:
        """
        Sign a fresh upload token with the private key.

        This is a local computation; failures are not expected and propagate.
        """
        params = self._sdk.get_authentication_parameters()
        return AuthenticationParameters(**params)

    @async_log_execution_time
    async def delete_file(self, file_id: Any) -> DeletionResult:
        """
        Ask ImageKit to delete a stored file.

        `file_id` is forwarded as given, including None, so ImageKit's own
        validation error is what the caller sees.
        """
        try:
            result = await run_in_threadpool(self._sdk.delete_file, file_id)
        except Exception as e:
            logger.warning("ImageKit deletion failed for file_id=%r: %s", file_id, e)
            return DeletionFailed(file_id=file_id, error=_error_to_dict(e))

        logger.info("ImageKit deleted file_id=%r", file_id)
        return DeletionSucceeded(file_id=file_id, result=_result_to_dict(result))
