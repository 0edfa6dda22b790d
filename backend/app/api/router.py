"""
Main router grouping every sub-router.
"""
from fastapi import APIRouter

from app.api import health
from app.api import admissions
from app.api import beds
from app.api import dashboard
from app.api.auth_router import router as auth_router
from app.schemas.responses import ErrorResponse

api_router = APIRouter()

# Health check (no authentication, used by load balancers)
api_router.include_router(health.router)

api_router.include_router(auth_router)

api_router.include_router(
    admissions.router,
    prefix="/admission",
    tags=["Admissions"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)

api_router.include_router(
    beds.router,
    prefix="/bed",
    tags=["Beds"]
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["Dashboards"]
)
