# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from bookstore.logging import logger
from bookstore.middlewares.correlation_id import CorrelationIDMiddleware
from bookstore.routing import collect_subrouters
from bookstore.settings import app_settings
from bookstore.storage.db import engine, wait_and_init_db
from bookstore.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifecycle.

    Startup waits for the database (and creates missing tables when
    DB_CREATE_TABLES is set); shutdown disposes the connection pool.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    The application gets:
    - the routers collected by ``collect_subrouters()`` (authors under
      API_PREFIX, health at the root)
    - exception handlers that keep internal error text away from clients
    - CORS (allow-all unless CORS_ALLOW_ORIGINS says otherwise)
    - HTTPS redirection when HTTPS_REDIRECT is set
    - correlation IDs for every request
    """
    app = FastAPI(
        title="Bookstore API",
        description="Authors catalog of the bookstore",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → HTTPSRedirectMiddleware → CORSMiddleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if app_settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
