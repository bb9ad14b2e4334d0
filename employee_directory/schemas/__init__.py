# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EmployeeFields(BaseModel):
    """Employee fields as sent by the client.

    Every field is optional so the same structure serves create and partial
    update; ``model_fields_set`` tells which fields were actually supplied.
    Values are left loosely typed here and checked by ``EmployeeService``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[Any] = None
    position: Optional[Any] = None
    email: Optional[Any] = None
    department: Optional[Any] = None
    phone: Optional[Any] = None
    start_date: Optional[Any] = Field(
        None, validation_alias=AliasChoices("startDate", "start_date")
    )
    salary: Optional[Any] = None
    status: Optional[Any] = None

    def supplied(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class EmployeeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    position: str
    email: str
    department: str
    phone: str
    start_date: str = Field(..., alias="startDate")
    salary: int
    status: str
    created_at: str = Field(..., alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")


class DeleteEmployeeResponse(BaseModel):
    message: str
    employee: EmployeeOut


class SendEmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    employee_id: Optional[Any] = Field(
        None, validation_alias=AliasChoices("employeeId", "employee_id")
    )
    email_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("emailType", "email_type")
    )
    custom_message: Optional[str] = Field(
        None, validation_alias=AliasChoices("customMessage", "custom_message")
    )


class SendEmailResponse(BaseModel):
    message: str
    data: Any = None
    employee: str


class DashboardStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_employees: int = Field(0, alias="totalEmployees")
    active_employees: int = Field(0, alias="activeEmployees")
    departments: int = 0
    average_salary: int = Field(0, alias="averageSalary")
    department_breakdown: Dict[str, int] = Field(
        default_factory=dict, alias="departmentBreakdown"
    )
    recent_hires: int = Field(0, alias="recentHires")


class HealthOut(BaseModel):
    status: str
    environment: str
    timestamp: datetime


class DebugOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    environment: str
    employee_count: int = Field(..., alias="employeeCount")
    employees: List[EmployeeOut]
    database: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
    fields: Optional[Dict[str, str]] = None
