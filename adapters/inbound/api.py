# API Adapter - FastAPI entry point

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.inbound.dependencies import AppDependencies
from adapters.inbound.routes import connection_router, health_router, tables_router
from config.settings import settings
from core.domain.errors import (
    ConnectionFailedError,
    DataAccessError,
    NotConnectedError,
    ValidationError,
)
from core.domain.responses import APIResponse
from utils.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


def status_for(exc: DataAccessError) -> int:
    if isinstance(exc, ConnectionFailedError):
        return 502
    if isinstance(exc, NotConnectedError):
        return 409
    if isinstance(exc, ValidationError):
        return 400
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando {settings.app_name} API...")
    yield
    logger.info("Cerrando API...")
    deps = AppDependencies.get_instance()
    await deps.service.disconnect()


app = FastAPI(
    title=f"{settings.app_name} API",
    description="Acceso paginado y tipado a tablas de SQL Server",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.code} - {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=status,
        content=APIResponse.from_exception(exc).model_dump(),
    )


app.include_router(health_router)
app.include_router(connection_router)
app.include_router(tables_router)
