# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: in-memory employee storage.
Process-local; contents vanish on restart.
"""

import threading
from typing import Any, Dict, List, Optional

from employee_directory.models.domain import Employee
from employee_directory.repositories.base import (
    EmployeeRepository, new_employee_id, utcnow, writable,
)


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed store. Insertion order doubles as creation order."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._store: Dict[str, Employee] = {}
        self._lock = threading.Lock()

    # ── Read ──

    def get_all(self) -> List[Employee]:
        with self._lock:
            return list(reversed(list(self._store.values())))

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._store.get(employee_id)

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        with self._lock:
            return any(
                emp.email == email and emp.id != exclude_id
                for emp in self._store.values()
            )

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def create(self, fields: Dict[str, Any]) -> Employee:
        employee = Employee(
            id=new_employee_id(),
            created_at=utcnow(),
            updated_at=None,
            **writable(fields),
        )
        with self._lock:
            self._store[employee.id] = employee
        return employee

    def update(self, employee_id: str, changes: Dict[str, Any]) -> Optional[Employee]:
        with self._lock:
            current = self._store.get(employee_id)
            if current is None:
                return None
            updated = current.model_copy(
                update={**writable(changes), "updated_at": utcnow()}
            )
            self._store[employee_id] = updated
        return updated

    def delete(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._store.pop(employee_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
