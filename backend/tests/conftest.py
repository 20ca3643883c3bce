"""Test fixtures for the backend."""
import os

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from employee_api.config import Settings  # noqa: E402
from employee_api.main import create_app  # noqa: E402
from employee_api.store import EmployeeStore  # noqa: E402


@pytest.fixture
def store() -> EmployeeStore:
    """A freshly seeded store, so every test starts from ids 1-3."""

    return EmployeeStore.with_seed_data()


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", enable_swagger=True)


@pytest.fixture
def app(settings: Settings, store: EmployeeStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
