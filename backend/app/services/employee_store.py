"""Employee persistence: the store interface and its backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.db import build_engine, build_session_maker
from app.models.employee import Employee
from app.models.orm import Base, EmployeeORM

logger = logging.getLogger(__name__)


class EmployeeStore(ABC):
    """Owns the authoritative set of employee records.

    ``save`` assigns an id when the employee has none, otherwise it writes the
    record under the given id. ``delete_by_id`` succeeds whether or not the
    record exists. Returned employees are copies; mutating them does not
    change stored state until they are saved again.
    """

    async def initialize(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def check_connection(self) -> bool:
        return True

    @abstractmethod
    async def find_all(self) -> list[Employee]: ...

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Employee | None: ...

    @abstractmethod
    async def save(self, employee: Employee) -> Employee: ...

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None: ...


class InMemoryEmployeeStore(EmployeeStore):
    def __init__(self) -> None:
        self._records: dict[int, Employee] = {}
        self._last_id = 0

    async def find_all(self) -> list[Employee]:
        return [self._records[key].model_copy() for key in sorted(self._records)]

    async def find_by_id(self, employee_id: int) -> Employee | None:
        record = self._records.get(employee_id)
        return record.model_copy() if record is not None else None

    async def save(self, employee: Employee) -> Employee:
        if employee.id is None:
            self._last_id += 1
            employee_id = self._last_id
        else:
            employee_id = employee.id
            self._last_id = max(self._last_id, employee_id)

        stored = employee.model_copy(update={"id": employee_id})
        self._records[employee_id] = stored
        return stored.model_copy()

    async def delete_by_id(self, employee_id: int) -> None:
        self._records.pop(employee_id, None)


def _to_employee(row: EmployeeORM) -> Employee:
    return Employee(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        role=row.role,
    )


class SqlEmployeeStore(EmployeeStore):
    """Relational backend on an async SQLAlchemy engine.

    Each call runs in its own transaction.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self.engine: AsyncEngine | None = None
        self.session_maker: async_sessionmaker[AsyncSession] | None = None
        self.initialized: bool = False

    async def initialize(self) -> None:
        if self.initialized:
            return

        self.engine = build_engine(self.database_url, echo=self.echo)
        self.session_maker = build_session_maker(self.engine)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self.initialized = True
        logger.info("SqlEmployeeStore initialized (url=%s)", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_maker = None
            self.initialized = False

    async def check_connection(self) -> bool:
        if not self.engine:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.exception("Database connection check failed")
            return False

    def _session(self) -> AsyncSession:
        if self.session_maker is None:
            raise RuntimeError("SqlEmployeeStore used before initialize()")
        return self.session_maker()

    async def find_all(self) -> list[Employee]:
        async with self._session() as session:
            result = await session.execute(select(EmployeeORM).order_by(EmployeeORM.id))
            return [_to_employee(row) for row in result.scalars().all()]

    async def find_by_id(self, employee_id: int) -> Employee | None:
        async with self._session() as session:
            row = await session.get(EmployeeORM, employee_id)
            return _to_employee(row) if row is not None else None

    async def save(self, employee: Employee) -> Employee:
        async with self._session() as session, session.begin():
            row = None
            if employee.id is not None:
                row = await session.get(EmployeeORM, employee.id)

            if row is None:
                row = EmployeeORM(id=employee.id)
                session.add(row)

            row.first_name = employee.first_name
            row.last_name = employee.last_name
            row.role = employee.role
            await session.flush()
            return _to_employee(row)

    async def delete_by_id(self, employee_id: int) -> None:
        async with self._session() as session, session.begin():
            await session.execute(delete(EmployeeORM).where(EmployeeORM.id == employee_id))


def build_employee_store(settings: Settings) -> EmployeeStore:
    backend = settings.EMPLOYEE_STORE.lower()
    if backend == "memory":
        return InMemoryEmployeeStore()
    if backend == "sql":
        return SqlEmployeeStore(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    raise ValueError(f"Unknown EMPLOYEE_STORE: {settings.EMPLOYEE_STORE!r}")
