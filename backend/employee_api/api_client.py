"""
HTTP API client for talking to the employee service.

Usage pattern:

    from employee_api.api_client import EmployeeAPIClient

    async with EmployeeAPIClient() as client:
        employees = await client.list_employees()
        created = await client.create_employee({"name": "Ann", "email": "a@x.com"})
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
EMPLOYEES_PATH = "/api/employees"


def _load_base_url() -> str:
    """
    Determine the service base URL.

    Priority:
    1. Environment variable EMPLOYEE_API_BASE_URL
    2. Default: http://127.0.0.1:8000
    """
    env_url = os.getenv("EMPLOYEE_API_BASE_URL")
    if env_url:
        return env_url.rstrip("/")
    return DEFAULT_BASE_URL


# -----------------------------
# Error types
# -----------------------------


class APIError(Exception):
    """Generic API error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EmployeeNotFound(APIError):
    """The service has no employee with the requested id."""


class InvalidEmployee(APIError):
    """The service rejected the employee payload."""


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text


def _raise_for_status(resp: httpx.Response, action: str) -> None:
    if resp.status_code == 404:
        raise EmployeeNotFound(_error_message(resp), resp.status_code)
    if resp.status_code == 400:
        raise InvalidEmployee(_error_message(resp), resp.status_code)

    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise APIError(f"{action} failed: {exc.response.text}", resp.status_code) from exc


# -----------------------------
# Main API client
# -----------------------------


class EmployeeAPIClient:
    """
    Reusable async HTTP client for the employee service.

    ``transport`` lets callers route requests somewhere other than the
    network, e.g. ``httpx.ASGITransport(app=app)`` to talk to an in-process app.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url: str = (base_url or _load_base_url()).rstrip("/")
        self._transport = transport
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "EmployeeAPIClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ---------- Internal helpers ----------

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=self._timeout,
            )
        return self._client

    # ---------- Public methods ----------

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def health(self) -> Dict[str, Any]:
        """Call /health on the service."""
        client = await self._ensure_client()
        resp = await client.get("/health")
        _raise_for_status(resp, "GET /health")
        return resp.json()

    async def list_employees(self) -> List[Dict[str, Any]]:
        """GET /api/employees."""
        client = await self._ensure_client()
        resp = await client.get(EMPLOYEES_PATH)
        _raise_for_status(resp, f"GET {EMPLOYEES_PATH}")

        data = resp.json()
        if not isinstance(data, list):
            raise APIError(f"Expected a list of employees from {EMPLOYEES_PATH}")
        return data

    async def get_employee(self, emp_id: int) -> Dict[str, Any]:
        """GET /api/employees/{id}."""
        client = await self._ensure_client()
        resp = await client.get(f"{EMPLOYEES_PATH}/{emp_id}")
        _raise_for_status(resp, f"GET {EMPLOYEES_PATH}/{emp_id}")
        return resp.json()

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST /api/employees.

        Returns the stored employee, including the id the service assigned.
        """
        client = await self._ensure_client()
        resp = await client.post(EMPLOYEES_PATH, json=employee_data)
        _raise_for_status(resp, f"POST {EMPLOYEES_PATH}")
        return resp.json()

    async def update_employee(self, emp_id: int, employee_data: Dict[str, Any]) -> None:
        """PUT /api/employees/{id}. The service answers 204 with no body."""
        client = await self._ensure_client()
        resp = await client.put(f"{EMPLOYEES_PATH}/{emp_id}", json=employee_data)
        _raise_for_status(resp, f"PUT {EMPLOYEES_PATH}/{emp_id}")

    async def delete_employee(self, emp_id: int) -> None:
        """DELETE /api/employees/{id}."""
        client = await self._ensure_client()
        resp = await client.delete(f"{EMPLOYEES_PATH}/{emp_id}")
        _raise_for_status(resp, f"DELETE {EMPLOYEES_PATH}/{emp_id}")
