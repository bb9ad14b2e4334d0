# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for employees stored in a relational table."""
from typing import Any, Dict, List, Optional

from sqlalchemy import (
    Column, Date, DateTime, Integer, MetaData, String, Table, delete, func,
    insert, select, text, update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from employee_directory.core.logging import get_logger
from employee_directory.exceptions import ConflictError, StorageError
from employee_directory.models.domain import DEFAULT_DEPARTMENT, DEFAULT_STATUS, Employee
from employee_directory.repositories.base import (
    EmployeeRepository, new_employee_id, utcnow, writable,
)

logger = get_logger(__name__)

metadata = MetaData()

employees_table = Table(
    "employees",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("position", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("department", String(255), nullable=False, default=DEFAULT_DEPARTMENT),
    Column("phone", String(50), nullable=False, default=""),
    Column("start_date", Date, nullable=False),
    Column("salary", Integer, nullable=False, default=0),
    Column("status", String(50), nullable=False, default=DEFAULT_STATUS),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)


def _row_to_employee(row) -> Employee:
    return Employee.model_validate(dict(row._mapping))


class SqlEmployeeRepository(EmployeeRepository):
    backend_name = "sql"

    def __init__(self, engine: Engine, create_schema: bool = True):
        self._engine = engine
        if create_schema:
            self.ensure_schema()

    def ensure_schema(self) -> None:
        try:
            metadata.create_all(self._engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.exception("Could not create employees table")
            raise StorageError("Failed to prepare employees table") from exc

    # ── Read ───────────────────────────────────────────────────────────

    def get_all(self) -> List[Employee]:
        stmt = select(employees_table).order_by(employees_table.c.created_at.desc())
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).fetchall()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to read employees") from exc
        return [_row_to_employee(r) for r in rows]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    select(employees_table).where(employees_table.c.id == employee_id)
                ).fetchone()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to read employee") from exc
        return _row_to_employee(row) if row else None

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        stmt = select(employees_table.c.id).where(employees_table.c.email == email)
        if exclude_id:
            stmt = stmt.where(employees_table.c.id != exclude_id)
        try:
            with self._engine.connect() as conn:
                return conn.execute(stmt.limit(1)).fetchone() is not None
        except SQLAlchemyError as exc:
            raise StorageError("Failed to check employee email") from exc

    def count(self) -> int:
        try:
            with self._engine.connect() as conn:
                return conn.execute(
                    select(func.count()).select_from(employees_table)
                ).scalar() or 0
        except SQLAlchemyError as exc:
            raise StorageError("Failed to count employees") from exc

    # ── Write ──────────────────────────────────────────────────────────

    def create(self, fields: Dict[str, Any]) -> Employee:
        values = {
            **writable(fields),
            "id": new_employee_id(),
            "created_at": utcnow(),
            "updated_at": None,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(insert(employees_table).values(**values))
        except IntegrityError as exc:
            raise ConflictError() from exc
        except (SQLAlchemyError, OverflowError) as exc:
            raise StorageError("Failed to create employee") from exc
        return Employee.model_validate(values)

    def update(self, employee_id: str, changes: Dict[str, Any]) -> Optional[Employee]:
        values = {**writable(changes), "updated_at": utcnow()}
        by_id = employees_table.c.id == employee_id
        try:
            with self._engine.begin() as conn:
                result = conn.execute(update(employees_table).where(by_id).values(**values))
                if result.rowcount == 0:
                    return None
                row = conn.execute(select(employees_table).where(by_id)).fetchone()
        except IntegrityError as exc:
            raise ConflictError() from exc
        except (SQLAlchemyError, OverflowError) as exc:
            raise StorageError("Failed to update employee") from exc
        return _row_to_employee(row)

    def delete(self, employee_id: str) -> Optional[Employee]:
        by_id = employees_table.c.id == employee_id
        try:
            with self._engine.begin() as conn:
                row = conn.execute(select(employees_table).where(by_id)).fetchone()
                if row is None:
                    return None
                conn.execute(delete(employees_table).where(by_id))
        except SQLAlchemyError as exc:
            raise StorageError("Failed to delete employee") from exc
        return _row_to_employee(row)

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self):
        self._engine.dispose()
