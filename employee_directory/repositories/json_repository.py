# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: employees persisted to a flat JSON file.
The whole file is rewritten on every mutation (temp file + atomic rename).
"""

import json
import os
import tempfile
import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from employee_directory.core.logging import get_logger
from employee_directory.exceptions import StorageError
from employee_directory.models.domain import Employee
from employee_directory.repositories.base import (
    EmployeeRepository, new_employee_id, utcnow, writable,
)

logger = get_logger(__name__)


class JsonFileEmployeeRepository(EmployeeRepository):
    """JSON array on disk, oldest record first."""

    backend_name = "json"

    def __init__(self, path: str) -> None:
        self._path = path
        self._lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._path

    # ── Read ──

    def get_all(self) -> List[Employee]:
        with self._lock:
            return list(reversed(self._load()))

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return next((e for e in self._load() if e.id == employee_id), None)

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        with self._lock:
            return any(e.email == email and e.id != exclude_id for e in self._load())

    # ── Write ──

    def create(self, fields: Dict[str, Any]) -> Employee:
        employee = Employee(
            id=new_employee_id(),
            created_at=utcnow(),
            updated_at=None,
            **writable(fields),
        )
        with self._lock:
            records = self._load()
            records.append(employee)
            self._save(records)
        return employee

    def update(self, employee_id: str, changes: Dict[str, Any]) -> Optional[Employee]:
        with self._lock:
            records = self._load()
            for idx, current in enumerate(records):
                if current.id == employee_id:
                    records[idx] = current.model_copy(
                        update={**writable(changes), "updated_at": utcnow()}
                    )
                    self._save(records)
                    return records[idx]
        return None

    def delete(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            records = self._load()
            for idx, current in enumerate(records):
                if current.id == employee_id:
                    removed = records.pop(idx)
                    self._save(records)
                    return removed
        return None

    def verify_connection(self) -> None:
        with self._lock:
            self._load()

    # ── Private ──

    def _load(self) -> List[Employee]:
        if not os.path.exists(self._path):
            return []
        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array of employees")
            return [Employee.model_validate(item) for item in raw]
        except (OSError, ValueError, PydanticValidationError) as exc:
            logger.exception("Could not read employee file %s", self._path)
            raise StorageError("Failed to read employee data file") from exc

    def _save(self, records: List[Employee]) -> None:
        directory = os.path.dirname(os.path.abspath(self._path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump([e.to_json() for e in records], fh, indent=2)
                os.replace(tmp_path, self._path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            logger.exception("Could not write employee file %s", self._path)
            raise StorageError("Failed to write employee data file") from exc
