"""ImageKit fixtures for tests. No network access: the SDK is replaced by FakeImageKitSDK."""
import hashlib
import hmac
import time
import uuid
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from images_api.adapters.imagekit import ImageKitClient
from images_api.config.settings import Settings
from images_api.main import create_app
from tests.consts import (
    TEST_FILE_ID,
    TEST_PRIVATE_KEY,
    TEST_PUBLIC_KEY,
    TEST_URL_ENDPOINT,
)

NOT_FOUND_MESSAGE = "The requested file does not exist."
SUPPORT_HELP = "For support kindly contact us at support@imagekit.io ."
MISSING_FILE_ID_MESSAGE = "Missing File ID parameter for this request"


class NotFoundException(Exception):
    """Shaped like the SDK's exceptions: message, response_help, response_metadata."""

    def __init__(self, message, response_help="", response_metadata=None):
        super().__init__(message)
        self.message = message
        self.response_help = response_help
        self.response_metadata = response_metadata


class FakeImageKitSDK:
    """In-memory stand-in for `imagekitio.ImageKit`."""

    def __init__(self, file_ids=(TEST_FILE_ID,)):
        self.files = set(file_ids)
        self.delete_calls = []

    def get_authentication_parameters(self, token="", expire=0):
        token = token or str(uuid.uuid4())
        expire = expire or int(time.time()) + 60 * 30
        signature = hmac.new(
            TEST_PRIVATE_KEY.encode(),
            (token + str(expire)).encode(),
            hashlib.sha1,
        ).hexdigest()
        return {"token": token, "expire": expire, "signature": signature}

    def delete_file(self, file_id=None):
        self.delete_calls.append(file_id)
        if not file_id:
            raise TypeError({"message": MISSING_FILE_ID_MESSAGE, "help": ""})
        if not isinstance(file_id, str) or file_id not in self.files:
            raise NotFoundException(NOT_FOUND_MESSAGE, SUPPORT_HELP)
        self.files.remove(file_id)
        return SimpleNamespace(
            response_metadata=SimpleNamespace(http_status_code=204, raw=None, headers={})
        )


def make_settings(**overrides) -> Settings:
    values = {
        "imagekit_public_key": TEST_PUBLIC_KEY,
        "imagekit_private_key": TEST_PRIVATE_KEY,
        "imagekit_url_endpoint": TEST_URL_ENDPOINT,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_sdk() -> FakeImageKitSDK:
    return FakeImageKitSDK()


@pytest.fixture
def imagekit_client(fake_sdk) -> ImageKitClient:
    return ImageKitClient(fake_sdk)


@pytest.fixture
def client(settings, imagekit_client):
    app = create_app(settings=settings, imagekit=imagekit_client)
    with TestClient(app) as test_client:
        yield test_client
