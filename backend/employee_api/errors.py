"""Domain errors raised by the employee store."""
from fastapi import status


class EmployeeError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidEmployeeError(EmployeeError):
    """A required employee field is missing or blank."""

    status_code = status.HTTP_400_BAD_REQUEST


class EmployeeNotFoundError(EmployeeError):
    """No employee exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee with ID {employee_id} not found")
        self.employee_id = employee_id
