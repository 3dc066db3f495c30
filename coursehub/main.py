"""
Main FastAPI application.

Course platform API over a single JSON document with:
- CORS configuration
- Error handling
- Request ID tracking
- Structured logging
"""

import time
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from coursehub.config import configure_logging, get_settings
from coursehub.core import container
from coursehub.infrastructure.catalog.routers import courses
from coursehub.infrastructure.certification.routers import certificates
from coursehub.infrastructure.common.exception_handlers import register_exception_handlers
from coursehub.infrastructure.common.schemas import HealthResponse, ServiceInfoResponse
from coursehub.infrastructure.identity.routers import instructors, users

settings = get_settings()

# Setup logging first
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    store = container.document_store()
    logger.info(
        "application_startup",
        app_name=settings.PROJECT_NAME,
        env=settings.ENVIRONMENT,
        data_file=str(store.path),
    )
    if not store.path.exists():
        logger.warning("document_missing_at_startup", data_file=str(store.path))

    yield

    logger.info("application_shutdown")


def create_app() -> FastAPI:
    """Build the FastAPI application with routers, middleware and handlers."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Courses, enrollments, comments and certificates over one JSON document.",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_middleware(request: Request, call_next: Any) -> Response:
        """Add a request ID to the logging context and the response headers."""
        request_id = str(uuid.uuid4())
        start_time = time.perf_counter()

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        logger.info("request_started")

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request_completed",
                status_code=response.status_code,
                duration_seconds=time.perf_counter() - start_time,
            )
            return response
        except Exception as e:
            logger.error(
                "request_failed",
                error=str(e),
                duration_seconds=time.perf_counter() - start_time,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()

    register_exception_handlers(app)

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)
    api_router.include_router(instructors.router)
    api_router.include_router(courses.router)
    api_router.include_router(users.router)
    api_router.include_router(certificates.router)
    app.include_router(api_router)

    @app.get("/", response_model=ServiceInfoResponse, tags=["root"])
    def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            message=f"Welcome to {settings.PROJECT_NAME}",
            version=settings.VERSION,
            docs=f"{settings.API_V1_PREFIX}/docs",
            api=settings.API_V1_PREFIX,
        )

    @app.get("/health", response_model=HealthResponse, tags=["root"])
    def health() -> HealthResponse:
        return HealthResponse(status="healthy")

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    uvicorn.run(
        "coursehub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    main()
