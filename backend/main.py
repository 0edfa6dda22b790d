"""
Hospital Administration API.
FastAPI application: admissions, beds, authentication and role dashboards.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.core.database import create_db_and_tables, get_session_direct
from app.core.exceptions import BaseAppException
from app.api.admissions import to_http_exception
from app.api.router import api_router
from app.utils.init_data import initialize_data
from app.utils.logger import configure_logging

logger = configure_logging()

# Create application
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

app.include_router(api_router, prefix=settings.API_PREFIX)


# ============================================
# ERROR HANDLERS
# ============================================

def describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        fields = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        if not fields and error.get("type") == "missing":
            messages.append("Request body is required")
            continue
        field = ".".join(fields)
        messages.append(f"{field}: {error.get('msg')}" if field else error.get("msg", "Invalid request"))
    return "; ".join(messages) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed input is a 400, not FastAPI's default 422."""
    detail = describe_validation_errors(exc)
    logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail}
    )


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    http_exc = to_http_exception(exc)
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


# ============================================
# STARTUP EVENTS
# ============================================

@app.on_event("startup")
def on_startup():
    create_db_and_tables()

    if settings.SEED_DEMO_DATA:
        session = get_session_direct()
        try:
            initialize_data(session)
        finally:
            session.close()

    logger.info(f"{settings.APP_TITLE} started ({settings.APP_ENV})")


@app.get("/")
def root():
    return {
        "name": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "api": settings.API_PREFIX
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
