"""Pydantic schemas used across the backend API."""
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer, model_validator

# Lower-cased, underscore-free key -> canonical JSON name
_FIELD_KEYS = {
    "id": "id",
    "name": "name",
    "email": "email",
    "department": "department",
    "position": "position",
    "salary": "salary",
    "status": "status",
    "hiredate": "hireDate",
}


class EmployeeWrite(BaseModel):
    """
    Employee payload for create and update.

    Every field is optional here; required fields are checked by the store so
    clients get the API's own error messages instead of schema errors. Keys
    are matched case-insensitively, so ``Name``, ``name`` and ``hire_date``
    are all accepted.
    """

    id: int | None = Field(default=None, description="Ignored; ids are assigned by the server")
    name: str | None = Field(default=None, description="Full name of the employee")
    email: str | None = Field(default=None, description="Email address of the employee")
    department: str | None = Field(default=None, description="Department where the employee works")
    position: str | None = Field(default=None, description="Job position/title")
    salary: Decimal | None = Field(default=None, description="Annual salary")
    status: str | None = Field(default=None, description="Employee status (Active, Inactive, On Leave)")
    hire_date: datetime | None = Field(
        default=None, alias="hireDate", description="Date when employee was hired"
    )

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            canonical = _FIELD_KEYS.get(str(key).replace("_", "").lower())
            if canonical is not None:
                normalized[canonical] = value
        return normalized


class EmployeeRead(BaseModel):
    """Employee representation returned by the API."""

    id: int
    name: str | None = None
    email: str | None = None
    department: str | None = None
    position: str | None = None
    salary: Decimal = Decimal(0)
    status: str | None = None
    hire_date: datetime = Field(serialization_alias="hireDate")

    model_config = {
        "from_attributes": True,
    }

    @field_serializer("salary")
    def _serialize_salary(self, salary: Decimal) -> int | float:
        # Whole amounts stay exact at any size; request bodies are parsed
        # with the json module, so fractional amounts arrive as floats anyway.
        if salary == salary.to_integral_value():
            return int(salary)
        return float(salary)


class Message(BaseModel):
    """Error body returned for rejected requests."""

    message: str


class ValidationMessage(Message):
    """Error body for requests the framework could not parse."""

    errors: list[dict[str, Any]] = Field(default_factory=list)
