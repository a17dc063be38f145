"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.api.error import ClientError, client_error_handler
from src.api.routes import accounts, bills, dashboard, ledger, paychecks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine, DISTRIBUTION_TABLE
    import src.domain  # noqa: F401  registers table models

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    logger.info(
        f"Loaded {len(DISTRIBUTION_TABLE.rules)} distribution rules "
        f"(default '{DISTRIBUTION_TABLE.default_rule}')"
    )
    yield
    await engine.dispose()


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        import sentry_sdk

        sentry_sdk.init(
            dsn=config.DSN_SENTRY,
            environment=config.SENTRY_ENVIRONMENT,
        )

    app = FastAPI(title="Paycheck Router", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start_time = time.time()
            response = await call_next(request)
            elapsed_ms = int((time.time() - start_time) * 1000)
            logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms}ms")
            return response

    app.add_exception_handler(ClientError, client_error_handler)

    for module in (accounts, paychecks, bills, ledger, dashboard):
        app.include_router(module.router, prefix=config.API_PREFIX)

    return app
