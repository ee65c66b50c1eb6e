from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models.employee import Employee
from app.services.employee_store import InMemoryEmployeeStore, SqlEmployeeStore

BASE_URL = "http://testserver"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def memory_settings():
    return Settings(EMPLOYEE_STORE="memory", SEED_DATABASE=True)


@pytest.fixture
def app(memory_settings):
    return create_app(memory_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client():
    application = create_app(Settings(EMPLOYEE_STORE="memory", SEED_DATABASE=False))
    with TestClient(application) as c:
        yield c


@pytest.fixture
async def async_client(app):
    transport = ASGITransport(app=app)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
            yield ac


@pytest.fixture
def memory_store():
    return InMemoryEmployeeStore()


@pytest.fixture
async def sql_store():
    store = SqlEmployeeStore("sqlite+aiosqlite:///:memory:")
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def sample_employee():
    return Employee(first_name="Alice", last_name="Smith", role="engineer")


def fake_url_for(name: str, **path_params: object) -> str:
    if name == "get_employee":
        return f"{BASE_URL}/employees/{path_params['employee_id']}"
    if name == "list_employees":
        return f"{BASE_URL}/employees"
    raise KeyError(name)
