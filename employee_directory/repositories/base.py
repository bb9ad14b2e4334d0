# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: storage adapter contract for employee records.
NO business rules here — uniqueness and validation belong to the service.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from employee_directory.models.domain import Employee

# Fields a caller may write; id and timestamps are owned by the repository.
WRITABLE_FIELDS = (
    "name", "position", "email", "department", "phone",
    "start_date", "salary", "status",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_employee_id() -> str:
    return str(uuid.uuid4())


def writable(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k in WRITABLE_FIELDS}


class EmployeeRepository(ABC):
    """Capability set every storage backend implements."""

    backend_name: str = "unknown"

    # ── Read ──

    @abstractmethod
    def get_all(self) -> List[Employee]:
        """All employees, newest first."""

    @abstractmethod
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        ...

    @abstractmethod
    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        ...

    def count(self) -> int:
        return len(self.get_all())

    # ── Write ──

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> Employee:
        """Persist a new employee, assigning ``id`` and ``createdAt``."""

    @abstractmethod
    def update(self, employee_id: str, changes: Dict[str, Any]) -> Optional[Employee]:
        """Apply ``changes`` and refresh ``updatedAt``. None when absent."""

    @abstractmethod
    def delete(self, employee_id: str) -> Optional[Employee]:
        """Remove and return the record. None when absent."""

    # ── Lifecycle ──

    def verify_connection(self) -> None:
        self.count()

    def dispose(self) -> None:
        pass
