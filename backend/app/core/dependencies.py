from __future__ import annotations

from fastapi import Request

from app.services.employee_assembler import EmployeeResourceAssembler
from app.services.employee_store import EmployeeStore


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_employee_assembler(request: Request) -> EmployeeResourceAssembler:
    return request.app.state.employee_assembler
