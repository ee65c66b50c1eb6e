from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from app.core.dependencies import get_employee_assembler, get_employee_store
from app.core.errors import EmployeeNotFoundError
from app.models.employee import EmployeeCollection, EmployeeIn, EmployeeResource
from app.services.employee_assembler import EmployeeResourceAssembler
from app.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

# Ids are stored in a signed 64-bit integer column.
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=EmployeeCollection)
async def list_employees(
    request: Request,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    assembler: EmployeeResourceAssembler = Depends(get_employee_assembler),  # noqa: B008
):
    employees = await store.find_all()
    return assembler.to_collection(employees, request.url_for)


@router.post("", response_model=EmployeeResource, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeIn,
    request: Request,
    response: Response,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    assembler: EmployeeResourceAssembler = Depends(get_employee_assembler),  # noqa: B008
):
    employee = await store.save(payload.to_employee())
    logger.info("Created employee %s", employee.id)

    resource = assembler.to_resource(employee, request.url_for)
    response.headers["Location"] = resource.links.self_.href
    return resource


@router.get("/{employee_id}", response_model=EmployeeResource)
async def get_employee(
    employee_id: EmployeeId,
    request: Request,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    assembler: EmployeeResourceAssembler = Depends(get_employee_assembler),  # noqa: B008
):
    employee = await store.find_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)

    return assembler.to_resource(employee, request.url_for)


@router.put("/{employee_id}", response_model=EmployeeResource, status_code=status.HTTP_201_CREATED)
async def replace_employee(
    employee_id: EmployeeId,
    payload: EmployeeIn,
    request: Request,
    response: Response,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    assembler: EmployeeResourceAssembler = Depends(get_employee_assembler),  # noqa: B008
):
    # Answers 201 for updates as well as inserts.
    existing = await store.find_by_id(employee_id)
    if existing is not None:
        existing.first_name = payload.first_name
        existing.last_name = payload.last_name
        existing.role = payload.role
        employee = await store.save(existing)
        logger.info("Replaced employee %s", employee_id)
    else:
        employee = await store.save(payload.to_employee(employee_id))
        logger.info("Created employee %s from replace", employee_id)

    resource = assembler.to_resource(employee, request.url_for)
    response.headers["Location"] = resource.links.self_.href
    return resource


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: EmployeeId,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    await store.delete_by_id(employee_id)
    logger.info("Deleted employee %s", employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
