from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import Settings, settings
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.services.employee_assembler import EmployeeResourceAssembler
from app.services.employee_store import build_employee_store
from app.services.seed_loader import seed_employees

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    app_settings: Settings = application.state.settings
    store = build_employee_store(app_settings)
    try:
        await store.initialize()
    except Exception:
        logger.exception("Failed to initialize employee store (%s)", app_settings.EMPLOYEE_STORE)
        raise

    application.state.employee_store = store
    application.state.employee_assembler = EmployeeResourceAssembler()

    if app_settings.SEED_DATABASE:
        await seed_employees(store)

    yield
    await store.close()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    setup_logging(app_settings.LOG_LEVEL)

    application = FastAPI(
        title="Employee Directory API",
        description="Employee CRUD with hyperlinked resources",
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    application.state.settings = app_settings

    register_error_handlers(application)
    application.include_router(api_router)

    @application.get("/")
    async def root():
        return {"message": "Employee Directory API"}

    return application


app = create_app()
