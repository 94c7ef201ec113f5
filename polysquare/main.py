import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polysquare.api.v1.router import api_router
from polysquare.core.config import get_settings
from polysquare.core.exceptions import EngineNotFoundError, PolysquareError, ValidationError
from polysquare.core.logging import configure_logging
from polysquare.models.schemas import ErrorResponse
from polysquare.services.engines.registry import EngineRegistry

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    logger.info(
        "Starting %s with ciphers: %s",
        settings.app_name,
        ", ".join(cipher_type.value for cipher_type in EngineRegistry.list_registered()),
    )
    yield


async def polysquare_error_handler(request: Request, exc: PolysquareError) -> JSONResponse:
    """Render toolkit errors as ErrorResponse bodies."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, EngineNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)

    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Polybius-square cipher toolkit. "
            "Encrypt and decrypt with the checkerboard, two-square and "
            "three-square ciphers for puzzle and teaching use."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PolysquareError, polysquare_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "polysquare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
