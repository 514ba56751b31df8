# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Shop Service
============
Member registration, listing and renaming over a relational store, plus an
order listing driven by optional search criteria.

    /api/v2/*  DTO contract
    /api/v1/*  deprecated entity-shaped contract (LEGACY_API_ENABLED)

Port: 8080
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shop.controllers import (
    member_controller, member_legacy_controller, order_controller, system_controller,
)
from shop.core.config import settings
from shop.core.database import engine, init_db
from shop.core.dependencies import get_member_service
from shop.core.exceptions import NotFoundError
from shop.core.logging import get_logger
from shop.middleware import MetricsMiddleware, RequestIDMiddleware
from shop.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    init_db()
    try:
        get_member_service().seed_gauges()
    except SQLAlchemyError:
        logger.warning("Could not seed gauges, DB may not be ready yet")
    logger.info("Service started legacy_api=%s", settings.LEGACY_API_ENABLED)
    yield
    engine.dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Shop Service",
    description="Member and order API for the shop backend.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


def _error(status_code: int, error: str, exc: Exception, req_id) -> JSONResponse:
    body = ErrorResponse(error=error, detail=str(exc), request_id=req_id)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ── Exception handlers ────────────────────────────────────────────────────
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    req_id = getattr(request.state, "request_id", None)
    logger.info("Not found: %s", exc, extra={"request_id": req_id})
    return _error(404, "not_found", exc, req_id)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Database error", extra={"request_id": req_id})
    return _error(500, "database_error", exc, req_id)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return _error(500, "internal_server_error", exc, req_id)


# ── Routers ───────────────────────────────────────────────────────────────
def register_routers(application: FastAPI, legacy_api: bool = settings.LEGACY_API_ENABLED):
    application.include_router(system_controller.router)
    application.include_router(member_controller.router)
    application.include_router(order_controller.router)
    if legacy_api:
        application.include_router(member_legacy_controller.router)


register_routers(app)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
