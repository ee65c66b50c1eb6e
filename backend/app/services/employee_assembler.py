"""Turns stored employees into hyperlinked response representations."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from app.models.employee import (
    CollectionLinks,
    Employee,
    EmployeeCollection,
    EmployeeLinks,
    EmployeeResource,
    Link,
)

# Route names registered by app.api.v1.endpoints.employees
EMPLOYEE_ROUTE = "get_employee"
EMPLOYEES_ROUTE = "list_employees"

UrlFor = Callable[..., Any]


class EmployeeResourceAssembler:
    """Builds ``EmployeeResource`` and ``EmployeeCollection`` objects.

    ``url_for`` is a route URL builder with the signature of
    ``Request.url_for``: ``url_for(route_name, **path_params)``.
    """

    def to_resource(self, employee: Employee, url_for: UrlFor) -> EmployeeResource:
        if employee.id is None:
            raise ValueError("Cannot build a self link for an employee without an id")

        links = EmployeeLinks(
            self_=Link(href=str(url_for(EMPLOYEE_ROUTE, employee_id=employee.id))),
            employees=Link(href=str(url_for(EMPLOYEES_ROUTE))),
        )
        return EmployeeResource(**employee.model_dump(), links=links)

    def to_collection(self, employees: Iterable[Employee], url_for: UrlFor) -> EmployeeCollection:
        return EmployeeCollection(
            employees=[self.to_resource(employee, url_for) for employee in employees],
            links=CollectionLinks(self_=Link(href=str(url_for(EMPLOYEES_ROUTE)))),
        )
