"""
Health check endpoints.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.database import check_database_health
from app.utils.helpers import utc_now

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "System healthy"},
        503: {"description": "System unavailable"}
    }
)


@router.get("", response_model=None)
async def health_check() -> JSONResponse:
    """
    Basic health check.
    Returns 200 while the application is running.
    """
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": utc_now().isoformat(),
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV
        }
    )


@router.get("/readiness", response_model=None)
def readiness_check() -> JSONResponse:
    """Returns 200 only when the database answers."""
    database = check_database_health()
    ready = database["status"] == "healthy"

    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": utc_now().isoformat(),
            "checks": {"database": database}
        }
    )
