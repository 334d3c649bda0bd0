"""Exception handlers shared by every route."""

import logging

import pydantic
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that goes unhandled by a more specific exception handler."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


async def handle_pydantic_validation_errors(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    """Report validation errors raised inside handlers (not request parsing) as 422."""
    errors = exc.errors()
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({
            "detail": [
                {
                    "msg": error["msg"],
                    "input": error.get("input"),
                }
                for error in errors
            ]
        }),
    )
