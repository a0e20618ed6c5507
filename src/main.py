"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from config.settings import settings
from src.pm_common.database import Base, engine
from src.pm_common.errors import AppError
from src.pm_common.request_log import RequestLogMiddleware
from src.pm_common.response import error_response
from src.pm_ledger.api.router import router as ledger_router
from src.pm_ledger.infrastructure import db_models as _ledger_models  # noqa: F401
from src.pm_manager.api.router import router as manager_router
from src.pm_manager.infrastructure import db_models as _manager_models  # noqa: F401
from src.pm_payment.api.router import router as payment_router

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify the DB connection and create missing tables. Shutdown: dispose."""
    with engine.begin() as conn:
        conn.execute(text("SELECT 1"))
        Base.metadata.create_all(conn)
    yield
    engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(mode="json"),
    )


app.include_router(manager_router, prefix="/api/v1")
app.include_router(payment_router, prefix="/api/v1")
app.include_router(ledger_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
