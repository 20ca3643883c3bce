"""Employee record held by the in-memory store."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class Employee:
    """One employee record. Validation lives in the store, not here."""

    id: int
    name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    salary: Decimal = field(default_factory=Decimal)
    # Active, Inactive, On Leave
    status: str | None = None
    hire_date: datetime = datetime.min
