# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Storage backend selection — one repository per process, chosen at startup."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from employee_directory.core.config import Settings, settings as default_settings
from employee_directory.repositories import (
    EmployeeRepository, InMemoryEmployeeRepository, JsonFileEmployeeRepository,
    SqlEmployeeRepository,
)

STORAGE_BACKENDS = ("memory", "json", "sql")


def build_engine(database_url: str, pool_recycle: int = 300) -> Engine:
    kwargs = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_recycle"] = pool_recycle
    return create_engine(database_url, **kwargs)


def build_repository(config: Settings = default_settings) -> EmployeeRepository:
    backend = config.STORAGE_BACKEND
    if backend == "memory":
        return InMemoryEmployeeRepository()
    if backend == "json":
        return JsonFileEmployeeRepository(config.DATA_FILE)
    if backend == "sql":
        return SqlEmployeeRepository(build_engine(config.DATABASE_URL, config.POOL_RECYCLE))
    raise ValueError(
        f"Unknown STORAGE_BACKEND {backend!r}; expected one of {STORAGE_BACKENDS}"
    )
