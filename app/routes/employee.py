# app/routes/employee.py
import asyncio
import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from app.config import Settings, get_settings
from app.exceptions import EmployeeNotFoundError, InvalidEmployeeError
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from app.store import EmployeeStore, get_store
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

async def simulate_delay(settings: Settings):
    """Sleep for the configured artificial latency, if any."""
    if settings.SIMULATED_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.SIMULATED_DELAY_SECONDS)

def not_found(exc: EmployeeNotFoundError) -> HTTPException:
    logger.warning("Employee %s not found", exc.employee_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=create_error_response(
            message=exc.message,
            details=f"No employee found with ID {exc.employee_id}",
            example="Please ensure you're using a valid employee ID"
        )
    )

def invalid_input(exc: InvalidEmployeeError) -> HTTPException:
    logger.warning("Invalid employee data: %s", exc.details.get("reason"))
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=create_error_response(
            message=exc.message,
            details=exc.details.get("reason"),
            example="A non-empty 'name' is required; on update the body 'id' must match the path"
        )
    )

@router.get("/employees", response_model=List[EmployeeOut])
async def get_employees(
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    await simulate_delay(settings)
    return [EmployeeOut.model_validate(employee) for employee in store.list()]

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(
    employee_id: int,
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    await simulate_delay(settings)
    try:
        employee = store.get(employee_id)
    except EmployeeNotFoundError as exc:
        raise not_found(exc)

    return EmployeeOut.model_validate(employee)

@router.post("/employees", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: Request,
    response: Response,
    employee: Optional[EmployeeCreate] = Body(None),
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    await simulate_delay(settings)
    try:
        created = store.create(employee)
    except InvalidEmployeeError as exc:
        raise invalid_input(exc)

    response.headers["Location"] = str(request.url_for("get_employee", employee_id=created.id))
    return EmployeeOut.model_validate(created)

@router.put(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
async def update_employee(
    employee_id: int,
    employee: Optional[EmployeeUpdate] = Body(None),
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    await simulate_delay(settings)
    try:
        store.update(employee_id, employee)
    except InvalidEmployeeError as exc:
        raise invalid_input(exc)
    except EmployeeNotFoundError as exc:
        raise not_found(exc)

    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/employees/{employee_id}")
async def delete_employee(
    employee_id: int,
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    await simulate_delay(settings)
    try:
        store.delete(employee_id)
    except EmployeeNotFoundError as exc:
        raise not_found(exc)

    return {"message": "Employee deleted successfully"}
