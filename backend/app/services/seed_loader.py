"""Sample data loaded into an empty store at startup."""

from __future__ import annotations

import logging

from app.models.employee import Employee
from app.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

SEED_EMPLOYEES: list[tuple[str, str, str]] = [
    ("Bilbo", "Baggins", "burglar"),
    ("Frodo", "Baggins", "thief"),
]


async def seed_employees(store: EmployeeStore, *, only_if_empty: bool = True) -> list[Employee]:
    """Save the sample employees and return them as stored.

    With ``only_if_empty`` (the default) nothing is written when the store
    already holds records, so restarting against a persistent database does
    not duplicate the samples.
    """
    if only_if_empty and await store.find_all():
        logger.info("Store already populated, skipping seed data")
        return []

    saved: list[Employee] = []
    for first_name, last_name, role in SEED_EMPLOYEES:
        employee = await store.save(Employee(first_name=first_name, last_name=last_name, role=role))
        logger.info("Preloading %s", employee)
        saved.append(employee)
    return saved
