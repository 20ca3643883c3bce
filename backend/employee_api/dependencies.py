"""Reusable FastAPI dependencies."""
from fastapi import Request

from .store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    """Return the store owned by the running application."""

    return request.app.state.store
