"""
FastAPI application for the timestamp ledger.

Builds the application around a dependency container, registers the error
handlers that turn domain exceptions into JSON failure bodies, and provides
the ``tzledger`` console entry point.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tzledger import __version__
from tzledger.application.config import ApplicationConfig
from tzledger.domain.exceptions import DomainException
from tzledger.infrastructure.container import Container
from tzledger.infrastructure.middleware import RequestIDMiddleware
from tzledger.infrastructure.monitoring.logging import setup_structured_logging

from .routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    container: Container = app.state.container
    logger.info(
        "Starting timestamp service",
        extra={"zone_database": container.zone_database.version},
    )

    yield

    logger.info(
        "Shutting down timestamp service",
        extra={"stored_instants": container.repository.count()},
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "malformed request"


def register_exception_handlers(app: FastAPI, container: Container) -> None:
    """Route every failure through the container's exception mapper."""
    mapper = container.exception_mapper

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        return JSONResponse(
            status_code=mapper.to_status_code(exc),
            content=mapper.to_response_body(exc),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "status": "fail",
                "message": f"Invalid request body: {_format_validation_errors(exc)}",
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled error serving {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=mapper.to_status_code(exc),
            content=mapper.to_response_body(exc),
        )


def create_app(
    config: ApplicationConfig | None = None, container: Container | None = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Application configuration; defaults are used when omitted
        container: Pre-built container, mainly for tests

    Returns:
        Configured FastAPI application
    """
    container = container or Container(config)

    app = FastAPI(
        title="tzledger",
        description="Records timestamps and replays them in any IANA time zone",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app, container)
    app.include_router(router)

    return app


def main() -> None:
    """Run the service with uvicorn using configuration from the environment."""
    config = ApplicationConfig.from_env()
    config.validate()

    setup_structured_logging(
        level=config.logging.level,
        format_type=config.logging.format_type,
        log_file=config.logging.file,
    )

    app = create_app(config)

    logger.info(f"->> LISTENING on {config.server.bind_address}")
    logger.info("Server started successfully")

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
