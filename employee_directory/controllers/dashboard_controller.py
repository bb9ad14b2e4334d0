# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: dashboard statistics."""
from fastapi import APIRouter, Depends

from employee_directory.core.dependencies import get_employee_service
from employee_directory.exceptions import InternalError
from employee_directory.schemas import DashboardStats
from employee_directory.services.employee_service import EmployeeService
from employee_directory.services.stats import compute_dashboard_stats

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStats)
def dashboard_stats(service: EmployeeService = Depends(get_employee_service)):
    try:
        employees = service.list_employees()
    except InternalError as exc:
        raise InternalError("Failed to fetch dashboard statistics") from exc
    return compute_dashboard_stats(employees)
