"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from src.api.error import (
    ClientError,
    handle_client_error,
    handle_database_error,
    handle_generic_error,
    handle_validation_error,
)
from src.api.middleware.logging import RequestLoggingMiddleware
from src.api.routes import cards
from src.depends import engine

logger = logging.getLogger(__name__)


def init_sentry(config) -> None:
    if not config.DSN_SENTRY:
        logger.warning("ENABLE_SENTRY is set but DSN_SENTRY is empty, Sentry disabled")
        return

    sentry_sdk.init(
        dsn=config.DSN_SENTRY,
        environment=config.SENTRY_ENVIRONMENT,
        integrations=[FastApiIntegration(), SqlalchemyIntegration()],
        send_default_pii=False,
    )
    logger.info(f"Sentry initialized for environment {config.SENTRY_ENVIRONMENT}")


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.ENABLE_SENTRY:
        init_sentry(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info(f"Fuel card ledger listening on {config.API_HOST}:{config.API_PORT}")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Fuel Card Ledger API",
        version="1.0.0",
        description="Balances, top-ups and spend history for fuel cards",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(cards.router)

    return app
