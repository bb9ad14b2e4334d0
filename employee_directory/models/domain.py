# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

VALID_STATUSES = ("active", "inactive")

DEFAULT_DEPARTMENT = "General"
DEFAULT_STATUS = "active"


class Employee(BaseModel):
    """A stored employee record. JSON names are camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    position: str
    email: str
    department: str = DEFAULT_DEPARTMENT
    phone: str = ""
    start_date: date = Field(..., alias="startDate")
    salary: int = Field(0, ge=0)
    status: str = DEFAULT_STATUS
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
