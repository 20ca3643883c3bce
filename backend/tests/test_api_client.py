"""Tests for the async HTTP client, routed into the app in-process."""
import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport

from employee_api.api_client import (
    APIError,
    EmployeeAPIClient,
    EmployeeNotFound,
    InvalidEmployee,
    _load_base_url,
)


@pytest_asyncio.fixture
async def api_client(app: FastAPI) -> EmployeeAPIClient:
    async with EmployeeAPIClient(
        base_url="http://testserver", transport=ASGITransport(app=app)
    ) as api_client:
        yield api_client


def test_base_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMPLOYEE_API_BASE_URL", "http://hr.internal:8080/")
    assert _load_base_url() == "http://hr.internal:8080"

    monkeypatch.delenv("EMPLOYEE_API_BASE_URL")
    assert _load_base_url() == "http://127.0.0.1:8000"


@pytest.mark.asyncio
async def test_health(api_client: EmployeeAPIClient) -> None:
    assert await api_client.health() == {"status": "ok"}


@pytest.mark.asyncio
async def test_employee_lifecycle(api_client: EmployeeAPIClient) -> None:
    created = await api_client.create_employee({"name": "Ann", "email": "a@x.com"})
    assert created["id"] == 4

    await api_client.update_employee(4, {"name": "Ann Lee", "department": "Legal"})
    fetched = await api_client.get_employee(4)
    assert fetched["name"] == "Ann Lee"
    assert fetched["department"] == "Legal"
    assert fetched["email"] == "a@x.com"

    await api_client.delete_employee(4)
    employees = await api_client.list_employees()
    assert [e["id"] for e in employees] == [1, 2, 3]


@pytest.mark.asyncio
async def test_not_found_is_raised(api_client: EmployeeAPIClient) -> None:
    with pytest.raises(EmployeeNotFound) as excinfo:
        await api_client.get_employee(9999)

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Employee with ID 9999 not found"
    assert isinstance(excinfo.value, APIError)


@pytest.mark.asyncio
async def test_invalid_employee_is_raised(api_client: EmployeeAPIClient) -> None:
    with pytest.raises(InvalidEmployee, match="Employee email is required"):
        await api_client.create_employee({"name": "Ann"})


@pytest.mark.asyncio
async def test_close_is_idempotent(app: FastAPI) -> None:
    api_client = EmployeeAPIClient(base_url="http://testserver", transport=ASGITransport(app=app))
    assert (await api_client.list_employees())[0]["name"] == "John Doe"

    await api_client.close()
    await api_client.close()
