"""Domain errors and their HTTP translation."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class EmployeeNotFoundError(Exception):
    """Raised when no employee exists for the requested id."""

    def __init__(self, employee_id: int | str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee with id :{employee_id} is not found")


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(EmployeeNotFoundError)
    async def handle_employee_not_found(_request: Request, exc: EmployeeNotFoundError) -> PlainTextResponse:
        logger.warning("Employee not found: %s", exc.employee_id)
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)
