# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth_router, notes_router
from .config import Settings, get_settings
from .core.errors import NoteboxError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Notebox application",
        extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
    )

    # Allow tests to skip touching the real DB
    if os.getenv("NOTEBOX_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEBOX_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Notebox application")
    await dispose_engine()


async def bind_request_settings(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """Expose the resolved settings to the exception handlers."""
    request.state.settings = settings


app = FastAPI(
    title=settings.app_name,
    description="Personal notes API",
    version=settings.app_version,
    lifespan=lifespan,
    dependencies=[Depends(bind_request_settings)],
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(notes_router)


def _legacy_wire_format(request: Request) -> bool:
    # set by bind_request_settings; absent when routing failed before dependencies ran
    active = getattr(request.state, "settings", None) or get_settings()
    return active.legacy_wire_format


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": True, "message": message})


@app.exception_handler(NoteboxError)
async def notebox_error_handler(request: Request, exc: NoteboxError):
    status_code = exc.resolve_status(_legacy_wire_format(request))
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _envelope(status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg', 'invalid value')}" if field else "Invalid request body"
    return _envelope(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _envelope(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


# Root endpoint
@app.get("/")
async def root():
    return {"hello": "user"}


def main() -> None:
    import uvicorn

    uvicorn.run("notebox.main:app", host=settings.host, port=settings.port, reload=settings.reload)


if __name__ == "__main__":
    main()
