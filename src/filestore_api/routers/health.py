from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint for monitoring API status and component readiness.

    Returns status of the API and of the storage directory the app is serving.
    """
    settings = request.app.state.settings
    storage_dir = request.app.state.storage.root_dir

    health_status = {
        "status": "ok",
        "storage_backend": settings.storage_backend,
        "storage_dir": str(storage_dir),
        "components": {
            "api": "ready",
            "storage": "ready",
        },
        "ready": False
    }

    if not storage_dir.is_dir():
        health_status["components"]["storage"] = f"error: {storage_dir} is not a directory"
        health_status["status"] = "degraded"

    health_status["ready"] = all(
        state == "ready" for state in health_status["components"].values()
    )

    return health_status
