####################################
# --- Request/response schemas --- #
####################################

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

DELETE_SUCCESS_MESSAGE = (
    "Your image will NOT been stored until all transactions are completed successfully."
)
DELETE_FAILURE_MESSAGE = (
    "Your image has been stored although the transactions have failed. "
    "Please contact our team to have your image deleted."
)


class AuthenticationParameters(BaseModel):
    """Response model for `GET /uploadImages`."""
    token: str = Field(description="Unique token for a single upload.")
    expire: int = Field(description="Unix timestamp (seconds) after which the signature is rejected.")
    signature: str = Field(description="HMAC-SHA1 of token and expire, keyed with the private key.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "1bab386f-45ea-49e1-9f0d-6afe49a5b250",
                "expire": 1580372696,
                "signature": "0f9d5a45e97c24fa9200a9d5543c9af1e2c45a54",
            }
        }
    )


class DeleteImageRequest(BaseModel):
    """Request body for `POST /deleteImage`. `fileId` is passed to ImageKit unchecked."""
    file_id: Any = Field(
        None,
        alias="fileId",
        description="ImageKit file id of the image to delete. Not validated here.",
        json_schema_extra={"example": "598821f949c0a938d57563bd"},
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DeletionStatus(str, Enum):
    """Body-level outcome of a deletion request"""
    SUCCESS = 'success'
    FAILED = 'failed'


class DeleteImageResponse(BaseModel):
    """Response model for `POST /deleteImage`."""
    status: DeletionStatus
    result: Any = Field(
        None,
        description="ImageKit response metadata on success, the ImageKit error on failure.",
    )
    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "failed",
                "result": {
                    "name": "NotFoundException",
                    "message": "The requested file does not exist.",
                    "help": "For support kindly contact us at support@imagekit.io .",
                },
                "message": DELETE_FAILURE_MESSAGE,
            }
        }
    )
