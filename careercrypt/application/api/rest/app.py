import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from careercrypt.application.api.rest.routes import health
from careercrypt.application.api.v1.errors import map_error
from careercrypt.application.api.v1.routes import portfolios
from careercrypt.application.di import create_container
from careercrypt.config import Config, configure_logging
from careercrypt.domain.shared.error import CareerCryptError
from careercrypt.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    config = config or Config()

    configure_logging(config.logging)
    logger.info(
        "Starting %s v%s (ledger backend: %s)",
        config.server.name,
        config.server.version,
        config.ledger.backend,
    )

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(portfolios.router)

    @app_instance.exception_handler(CareerCryptError)
    async def careercrypt_error_handler(request: Request, exc: CareerCryptError):
        http_exc = map_error(exc)
        if http_exc.status_code >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
