# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bookshelf.logging import logger
from bookshelf.middlewares.correlation_id import CorrelationIDMiddleware
from bookshelf.routing import collect_subrouters
from bookshelf.storage.db import engine, wait_and_init_db
from bookshelf.utils.error_handler import register_exception_handlers

__version__ = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application startup and shutdown.

    Startup waits for the database and creates missing tables. Shutdown
    disposes of the connection pool.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Initialized database and tables")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    - Routers are collected from ``bookshelf/api/http``
    - Exception handlers turn errors into the common error envelope
    - CorrelationIDMiddleware tags each request for logging

    Returns:
        The configured FastAPI application.
    """
    app = FastAPI(
        title="bookshelf",
        description="Authors, their books and a movie lookup",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
