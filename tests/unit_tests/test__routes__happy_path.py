import time

from fastapi import status
from fastapi.testclient import TestClient

from images_api.schemas import DELETE_SUCCESS_MESSAGE
from tests.consts import ROUTE_ORIGIN, TEST_FILE_ID


def test__upload_images__returns_auth_parameters(client: TestClient):
    response = client.get("/uploadImages")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert set(body) == {"token", "expire", "signature"}
    assert body["token"]
    assert body["signature"]
    assert body["expire"] > int(time.time())


def test__upload_images__fresh_token_per_call(client: TestClient):
    first = client.get("/uploadImages").json()
    second = client.get("/uploadImages").json()

    assert first["token"] != second["token"]
    assert first["signature"] != second["signature"]


def test__delete_image__happy_path(client: TestClient, fake_sdk):
    response = client.post("/deleteImage", json={"fileId": TEST_FILE_ID})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "success",
        "result": {"http_status_code": 204, "raw": None},
        "message": DELETE_SUCCESS_MESSAGE,
    }
    assert fake_sdk.delete_calls == [TEST_FILE_ID]
    assert TEST_FILE_ID not in fake_sdk.files


def test__image_routes__send_route_origin(client: TestClient):
    upload_response = client.get("/uploadImages")
    delete_response = client.post("/deleteImage", json={"fileId": TEST_FILE_ID})

    assert upload_response.headers["access-control-allow-origin"] == ROUTE_ORIGIN
    assert delete_response.headers["access-control-allow-origin"] == ROUTE_ORIGIN


def test__image_routes__route_origin_wins_over_cors_middleware(client: TestClient):
    headers = {"Origin": "http://example.com"}

    upload_response = client.get("/uploadImages", headers=headers)
    delete_response = client.post("/deleteImage", json={"fileId": TEST_FILE_ID}, headers=headers)

    assert upload_response.headers["access-control-allow-origin"] == ROUTE_ORIGIN
    assert delete_response.headers["access-control-allow-origin"] == ROUTE_ORIGIN


def test__health__reports_ready(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "ok"
    assert body["ready"] is True
    assert body["components"] == {"api": "ready", "imagekit": "ready"}
