"""Request middleware: body size cap and the per-route CORS origin."""

import logging
from typing import Iterable

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

BODY_TOO_LARGE_DETAIL = "Request body too large"


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than `max_body_bytes` with a 413.

    A declared Content-Length over the cap is refused before the app runs.
    Bodies without a usable Content-Length are counted while they stream in;
    the 413 is raised as an HTTPException so FastAPI's body parsing passes it
    through untouched.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None and content_length.isdigit():
            if int(content_length) > self.max_body_bytes:
                logger.warning(
                    "Rejected %s %s: Content-Length %s exceeds %d bytes",
                    scope.get("method"), scope.get("path"), content_length, self.max_body_bytes,
                )
                response = JSONResponse(
                    status_code=413,
                    content={"detail": BODY_TOO_LARGE_DETAIL},
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(
                        "Rejected %s %s: streamed body exceeds %d bytes",
                        scope.get("method"), scope.get("path"), self.max_body_bytes,
                    )
                    raise HTTPException(
                        status_code=413,
                        detail=BODY_TOO_LARGE_DETAIL,
                    )
            return message

        await self.app(scope, limited_receive, send)


def pin_allowed_origin(paths: Iterable[str], origin: str):
    """
    Build an HTTP middleware that sets Access-Control-Allow-Origin on `paths`.

    It must wrap the CORS middleware so the route-level origin is the one the
    client sees. Preflight requests are left to the CORS middleware.
    """
    pinned_paths = frozenset(paths)

    async def middleware(request: Request, call_next):
        response = await call_next(request)
        if request.method != "OPTIONS" and request.url.path in pinned_paths:
            response.headers["Access-Control-Allow-Origin"] = origin
        return response

    return middleware
