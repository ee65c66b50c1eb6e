"""Employee models: the persisted record and its hyperlinked representations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Employee(_CamelModel):
    """A stored employee record. ``id`` is ``None`` until first saved."""

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def __str__(self) -> str:
        return f"Employee(id={self.id}, name={self.name!r}, role={self.role!r})"


class EmployeeIn(_CamelModel):
    """Inbound employee payload.

    Accepts either ``firstName``/``lastName`` or a single ``name`` which is
    split on the first space. Any ``id`` in the body is ignored.
    """

    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_name(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not data.get("name"):
            return data
        first, _, last = str(data["name"]).partition(" ")
        data = {k: v for k, v in data.items() if k != "name"}
        if "firstName" not in data and "first_name" not in data:
            data["firstName"] = first
        if "lastName" not in data and "last_name" not in data:
            data["lastName"] = last
        return data

    def to_employee(self, employee_id: int | None = None) -> Employee:
        return Employee(
            id=employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
        )


class Link(BaseModel):
    href: str


class EmployeeLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_: Link = Field(alias="self")
    employees: Link


class EmployeeResource(Employee):
    """Employee data plus its ``self`` and ``employees`` links."""

    links: EmployeeLinks = Field(alias="_links")


class CollectionLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_: Link = Field(alias="self")


class EmployeeCollection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    employees: list[EmployeeResource]
    links: CollectionLinks = Field(alias="_links")
