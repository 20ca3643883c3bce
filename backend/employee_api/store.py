"""In-memory employee store."""
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from .errors import EmployeeNotFoundError, InvalidEmployeeError
from .models import Employee
from .schemas import EmployeeWrite

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Active"


def seed_employees() -> list[Employee]:
    """Records the service starts with."""

    return [
        Employee(
            id=1,
            name="John Doe",
            email="john.doe@company.com",
            department="Engineering",
            position="Senior Software Engineer",
            salary=Decimal(120000),
            status="Active",
            hire_date=datetime(2020, 1, 15),
        ),
        Employee(
            id=2,
            name="Jane Smith",
            email="jane.smith@company.com",
            department="Product",
            position="Product Manager",
            salary=Decimal(110000),
            status="Active",
            hire_date=datetime(2019, 6, 20),
        ),
        Employee(
            id=3,
            name="Bob Johnson",
            email="bob.johnson@company.com",
            department="Sales",
            position="Sales Executive",
            salary=Decimal(90000),
            status="Active",
            hire_date=datetime(2021, 3, 10),
        ),
    ]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _is_unset(hire_date: datetime | None) -> bool:
    return hire_date is None or hire_date.replace(tzinfo=None) == datetime.min


class EmployeeStore:
    """
    Owns the ordered collection of employees for the life of the process.

    Every public method holds a single lock for its whole duration, so each
    operation is atomic with respect to the others. Records handed out are
    copies; callers cannot mutate the stored state directly.
    """

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: list[Employee] = [replace(e) for e in employees]
        self._lock = threading.Lock()

    @classmethod
    def with_seed_data(cls) -> "EmployeeStore":
        return cls(seed_employees())

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def _find(self, employee_id: int) -> Employee:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        logger.warning("Employee %s not found", employee_id)
        raise EmployeeNotFoundError(employee_id)

    def list_all(self) -> list[Employee]:
        """Return every employee in insertion order."""

        with self._lock:
            return [replace(e) for e in self._employees]

    def get(self, employee_id: int) -> Employee:
        """Return the employee with ``employee_id`` or raise EmployeeNotFoundError."""

        with self._lock:
            return replace(self._find(employee_id))

    def create(self, candidate: EmployeeWrite) -> Employee:
        """
        Validate and append a new employee.

        The candidate's id is ignored; the new id is one more than the current
        maximum (1 for an empty store). A missing hire date becomes the
        current UTC time and a blank status becomes ``Active``.
        """

        if _is_blank(candidate.name):
            raise InvalidEmployeeError("Employee name is required")
        if _is_blank(candidate.email):
            raise InvalidEmployeeError("Employee email is required")

        with self._lock:
            new_id = max((e.id for e in self._employees), default=0) + 1
            employee = Employee(
                id=new_id,
                name=candidate.name,
                email=candidate.email,
                department=candidate.department,
                position=candidate.position,
                salary=candidate.salary if candidate.salary is not None else Decimal(0),
                status=DEFAULT_STATUS if _is_blank(candidate.status) else candidate.status,
                hire_date=(
                    datetime.now(timezone.utc)
                    if _is_unset(candidate.hire_date)
                    else candidate.hire_date
                ),
            )
            self._employees.append(employee)
            logger.info("Created employee %s", new_id)
            return replace(employee)

    def update(self, employee_id: int, candidate: EmployeeWrite) -> Employee:
        """
        Merge ``candidate`` into an existing employee.

        Name is always replaced. Email, department, position and status are
        replaced only by non-blank values; salary only by values above zero.
        Id and hire date never change.
        """

        with self._lock:
            existing = self._find(employee_id)
            if _is_blank(candidate.name):
                raise InvalidEmployeeError("Employee name is required")

            existing.name = candidate.name
            if not _is_blank(candidate.email):
                existing.email = candidate.email
            if not _is_blank(candidate.department):
                existing.department = candidate.department
            if not _is_blank(candidate.position):
                existing.position = candidate.position
            if candidate.salary is not None and candidate.salary > 0:
                existing.salary = candidate.salary
            if not _is_blank(candidate.status):
                existing.status = candidate.status

            logger.info("Updated employee %s", employee_id)
            return replace(existing)

    def delete(self, employee_id: int) -> None:
        """Remove the employee with ``employee_id`` or raise EmployeeNotFoundError."""

        with self._lock:
            employee = self._find(employee_id)
            self._employees.remove(employee)
            logger.info("Deleted employee %s", employee_id)
