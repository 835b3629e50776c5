from fastapi import APIRouter, Depends, status
from typing import List
from app.dependencies import get_storage
from app.schemas.common import ApiResponse
from app.schemas.employee import EmployeeCreate, EmployeePaymentUpdate, EmployeeResponse
from app.services import employee_service
from app.storage import Storage
from app.core.tenant_context import get_tenant_id
from app.core.logging_config import logger

router = APIRouter()


@router.get("", response_model=ApiResponse[List[EmployeeResponse]])
def get_employees(
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Retrieve all employees for your tenant, ordered by name.
    
    The tenant is identified from the session token.
    """
    employees = employee_service.get_employees(storage, _tenant_id)
    return ApiResponse.ok(
        [EmployeeResponse.model_validate(e) for e in employees],
        "Employees retrieved"
    )


@router.post("", response_model=ApiResponse[EmployeeResponse], status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_data: EmployeeCreate,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Create a new employee.
    
    The tenant is identified from the session token; the body never
    carries a client id.
    
    Args:
        employee_data: Employee creation data
        storage: Persistence engine
        _tenant_id: Tenant context (resolved from the session token)
    
    Returns:
        Created employee
    """
    try:
        logger.info(f"Creating employee: name={employee_data.name}, tenant_id={_tenant_id}")
        result = employee_service.create_employee(storage, employee_data, _tenant_id)
        logger.info(f"Employee created successfully: id={result.id}")
        return ApiResponse.ok(EmployeeResponse.model_validate(result), "Employee created")
    except Exception as e:
        logger.error(f"Error creating employee: {type(e).__name__}: {str(e)}")
        raise


@router.delete("/{employee_id}", response_model=ApiResponse[None])
def delete_employee(
    employee_id: str,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Delete an employee.
    
    Raises:
        NotFoundOrNotOwned (404): If the employee doesn't exist or isn't yours
    """
    employee_service.delete_employee(storage, employee_id, _tenant_id)
    logger.info(f"Employee deleted: id={employee_id}, tenant_id={_tenant_id}")
    return ApiResponse.ok(None, "Employee deleted")


@router.put("/{employee_id}/payment", response_model=ApiResponse[None])
def update_employee_payment(
    employee_id: str,
    payment: EmployeePaymentUpdate,
    storage: Storage = Depends(get_storage),
    _tenant_id: str = Depends(get_tenant_id)
):
    """
    Set an employee's paid flag.
    
    Raises:
        NotFoundOrNotOwned (404): If the employee doesn't exist or isn't yours
    """
    employee_service.set_paid(storage, employee_id, _tenant_id, payment.paid)
    return ApiResponse.ok(None, "Payment status updated")
