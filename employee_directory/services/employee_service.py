# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for employee records: validation, defaults, uniqueness."""
import math
import re
from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Tuple

from employee_directory.core.logging import get_logger
from employee_directory.exceptions import (
    ConflictError, InternalError, NotFoundError, StorageError, ValidationError,
)
from employee_directory.metrics import (
    EMPLOYEES_CREATED, EMPLOYEES_DELETED, EMPLOYEES_TOTAL, EMPLOYEES_UPDATED,
)
from employee_directory.models.domain import (
    DEFAULT_DEPARTMENT, DEFAULT_STATUS, VALID_STATUSES, Employee,
)
from employee_directory.repositories.base import EmployeeRepository
from employee_directory.schemas import EmployeeFields

logger = get_logger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
REQUIRED_FIELDS = ("name", "position", "email")
# Upper bound of the 32-bit INTEGER salary column.
MAX_SALARY = 2 ** 31 - 1

SAMPLE_EMPLOYEES = [
    {
        "name": "John Doe",
        "position": "Software Engineer",
        "email": "john.doe@company.com",
        "department": "Engineering",
        "phone": "+1 (555) 123-4567",
        "start_date": date(2023, 1, 15),
        "salary": 75000,
        "status": "active",
    },
    {
        "name": "Jane Smith",
        "position": "Product Manager",
        "email": "jane.smith@company.com",
        "department": "Product",
        "phone": "+1 (555) 234-5678",
        "start_date": date(2023, 3, 20),
        "salary": 85000,
        "status": "active",
    },
    {
        "name": "Mike Johnson",
        "position": "UX Designer",
        "email": "mike.johnson@company.com",
        "department": "Design",
        "phone": "+1 (555) 345-6789",
        "start_date": date(2023, 2, 10),
        "salary": 70000,
        "status": "active",
    },
]


def _clean_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def parse_salary(value: Any) -> int:
    """Coerce a client-supplied salary to a non-negative int.

    Raises ValueError with a client-facing message.
    """
    if isinstance(value, bool):
        raise ValueError("Salary must be a number")
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError("Salary must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValueError("Salary must be a number")
    if number < 0:
        raise ValueError("Salary must not be negative")
    if number > MAX_SALARY:
        raise ValueError(f"Salary must not exceed {MAX_SALARY}")
    return int(number)


def parse_start_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = _clean_text(value)
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError("Start date must be a valid date (YYYY-MM-DD)")


def _today() -> date:
    return datetime.now(timezone.utc).date()


class EmployeeService:
    def __init__(self, repo: EmployeeRepository):
        self._repo = repo

    @property
    def repository(self) -> EmployeeRepository:
        return self._repo

    # ── Read ───────────────────────────────────────────────────────────

    def list_employees(self) -> List[Employee]:
        with self._storage("Failed to fetch employees"):
            return self._repo.get_all()

    def get_employee(self, employee_id: str) -> Employee:
        with self._storage("Failed to fetch employee"):
            employee = self._repo.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError(employee_id)
        return employee

    def employee_count(self) -> int:
        with self._storage("Failed to count employees"):
            return self._repo.count()

    # ── Write ──────────────────────────────────────────────────────────

    def create_employee(self, fields: EmployeeFields) -> Employee:
        values, errors = self._validate(fields.supplied())
        if errors:
            raise ValidationError(errors)

        with self._storage("Failed to create employee"):
            if self._repo.email_exists(values["email"]):
                raise ConflictError()
            record = {
                "name": values["name"],
                "position": values["position"],
                "email": values["email"],
                "department": values.get("department", DEFAULT_DEPARTMENT),
                "phone": values.get("phone") or "",
                "start_date": values.get("start_date") or _today(),
                "salary": values.get("salary", 0),
                "status": values.get("status") or DEFAULT_STATUS,
            }
            employee = self._repo.create(record)

        EMPLOYEES_CREATED.inc()
        EMPLOYEES_TOTAL.inc()
        logger.info("Employee created id=%s department=%s", employee.id, employee.department)
        return employee

    def update_employee(self, employee_id: str, fields: EmployeeFields) -> Employee:
        self.get_employee(employee_id)

        changes, errors = self._validate(fields.supplied())
        if errors:
            raise ValidationError(errors)

        with self._storage("Failed to update employee"):
            if "email" in changes and self._repo.email_exists(
                changes["email"], exclude_id=employee_id
            ):
                raise ConflictError()
            employee = self._repo.update(employee_id, changes)
        if employee is None:
            raise NotFoundError(employee_id)

        EMPLOYEES_UPDATED.inc()
        logger.info("Employee updated id=%s fields=%s", employee_id, sorted(changes))
        return employee

    def delete_employee(self, employee_id: str) -> Employee:
        with self._storage("Failed to delete employee"):
            removed = self._repo.delete(employee_id)
        if removed is None:
            raise NotFoundError(employee_id)

        EMPLOYEES_DELETED.inc()
        EMPLOYEES_TOTAL.dec()
        logger.info("Employee deleted id=%s", employee_id)
        return removed

    def seed_sample_employees(self) -> int:
        """Insert the sample employees when the store is empty."""
        if self.employee_count() > 0:
            return 0
        with self._storage("Failed to seed sample employees"):
            for sample in SAMPLE_EMPLOYEES:
                self._repo.create(dict(sample))
        logger.info("Inserted %d sample employees", len(SAMPLE_EMPLOYEES))
        return len(SAMPLE_EMPLOYEES)

    def refresh_gauges(self) -> None:
        EMPLOYEES_TOTAL.set(self.employee_count())

    # ── Private ────────────────────────────────────────────────────────

    @contextmanager
    def _storage(self, message: str):
        try:
            yield
        except StorageError as exc:
            logger.exception("%s: %s", message, exc)
            raise InternalError(message) from exc

    @staticmethod
    def _validate(supplied: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, str]]:
        """Normalise supplied fields and collect one message per bad field.

        Name, position and email are required on create and update alike;
        the remaining fields are only checked, and later merged, when supplied.
        """
        values: Dict[str, Any] = {}
        errors: Dict[str, str] = {}

        for field in REQUIRED_FIELDS:
            text = _clean_text(supplied.get(field))
            if not text:
                errors[field] = f"{field.capitalize()} is required"
            else:
                values[field] = text

        if "email" in values and not EMAIL_RE.match(values["email"]):
            errors["email"] = "Email must be a valid email address"

        if "department" in supplied and supplied["department"] is not None:
            values["department"] = _clean_text(supplied["department"]) or DEFAULT_DEPARTMENT
        if "phone" in supplied and supplied["phone"] is not None:
            values["phone"] = _clean_text(supplied["phone"])

        if supplied.get("salary") is not None:
            try:
                values["salary"] = parse_salary(supplied["salary"])
            except ValueError as exc:
                errors["salary"] = str(exc)

        if supplied.get("start_date") not in (None, ""):
            try:
                values["start_date"] = parse_start_date(supplied["start_date"])
            except ValueError as exc:
                errors["startDate"] = str(exc)

        if supplied.get("status") not in (None, ""):
            status = _clean_text(supplied["status"]).lower()
            if status not in VALID_STATUSES:
                errors["status"] = f"Status must be one of {', '.join(VALID_STATUSES)}"
            else:
                values["status"] = status

        return values, errors
