"""Employee endpoints for the FastAPI backend."""
from fastapi import APIRouter, Depends, Request, Response, status

from ..dependencies import get_store
from ..models import Employee
from ..schemas import EmployeeRead, EmployeeWrite, Message, ValidationMessage
from ..store import EmployeeStore

router = APIRouter(prefix="/api/employees", tags=["employees"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": Message, "description": "Employee not found"}}
BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationMessage, "description": "Invalid employee data"}
}
INVALID_ID = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationMessage, "description": "Employee ID is not an integer"}
}


@router.get(
    "",
    response_model=list[EmployeeRead],
    summary="Get all employees",
    description="Retrieves a list of all employees in the system",
    response_description="Successfully retrieved employees",
)
async def list_employees(store: EmployeeStore = Depends(get_store)) -> list[Employee]:
    return store.list_all()


@router.get(
    "/{id}",
    response_model=EmployeeRead,
    summary="Get employee by ID",
    description="Retrieves a specific employee by their unique identifier",
    response_description="Employee found",
    responses={**NOT_FOUND, **INVALID_ID},
)
async def get_employee(id: int, store: EmployeeStore = Depends(get_store)) -> Employee:
    return store.get(id)


@router.post(
    "",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new employee",
    description="Creates a new employee record in the system",
    response_description="Employee created successfully",
    responses=BAD_REQUEST,
)
async def create_employee(
    payload: EmployeeWrite,
    request: Request,
    response: Response,
    store: EmployeeStore = Depends(get_store),
) -> Employee:
    """Create an employee and point the Location header at it."""

    employee = store.create(payload)
    response.headers["Location"] = str(request.url_for("get_employee", id=employee.id))
    return employee


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update an employee",
    description="Updates an existing employee's information",
    response_description="Employee updated successfully",
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_employee(
    id: int,
    payload: EmployeeWrite,
    store: EmployeeStore = Depends(get_store),
) -> Response:
    store.update(id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an employee",
    description="Removes an employee record from the system",
    response_description="Employee deleted successfully",
    responses={**NOT_FOUND, **INVALID_ID},
)
async def delete_employee(id: int, store: EmployeeStore = Depends(get_store)) -> Response:
    store.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
