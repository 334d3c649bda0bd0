from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint for monitoring API status.

    Reports whether the ImageKit client was configured. ImageKit itself is not
    called, so a healthy response says nothing about the remote service.
    """
    health_status = {
        "status": "ok",
        "components": {
            "api": "ready",
            "imagekit": "not configured",
        },
        "ready": False,
    }

    settings = getattr(request.app.state, "settings", None)
    imagekit = getattr(request.app.state, "imagekit", None)
    if settings is not None and imagekit is not None:
        health_status["components"]["imagekit"] = "ready"
        health_status["url_endpoint"] = settings.imagekit_url_endpoint
    else:
        health_status["status"] = "degraded"

    health_status["ready"] = all(
        state == "ready" for state in health_status["components"].values()
    )
    return health_status
