# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: employee CRUD."""
from typing import List

from fastapi import APIRouter, Depends

from employee_directory.core.dependencies import get_employee_service
from employee_directory.schemas import DeleteEmployeeResponse, EmployeeFields, EmployeeOut
from employee_directory.services.employee_service import EmployeeService

router = APIRouter(prefix="/api", tags=["Employees"])


@router.get("/employees", response_model=List[EmployeeOut])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return [EmployeeOut(**e.to_json()) for e in service.list_employees()]


@router.get("/employees/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str,
                 service: EmployeeService = Depends(get_employee_service)):
    return EmployeeOut(**service.get_employee(employee_id).to_json())


@router.post("/employees", status_code=201, response_model=EmployeeOut)
def create_employee(body: EmployeeFields,
                    service: EmployeeService = Depends(get_employee_service)):
    return EmployeeOut(**service.create_employee(body).to_json())


@router.put("/employees/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: str, body: EmployeeFields,
                    service: EmployeeService = Depends(get_employee_service)):
    return EmployeeOut(**service.update_employee(employee_id, body).to_json())


@router.delete("/employees/{employee_id}", response_model=DeleteEmployeeResponse)
def delete_employee(employee_id: str,
                    service: EmployeeService = Depends(get_employee_service)):
    removed = service.delete_employee(employee_id)
    return DeleteEmployeeResponse(
        message="Employee deleted successfully",
        employee=EmployeeOut(**removed.to_json()),
    )
