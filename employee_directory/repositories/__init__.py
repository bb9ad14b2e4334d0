# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the storage adapters."""
from employee_directory.repositories.base import EmployeeRepository
from employee_directory.repositories.json_repository import JsonFileEmployeeRepository
from employee_directory.repositories.memory_repository import InMemoryEmployeeRepository
from employee_directory.repositories.sql_repository import SqlEmployeeRepository

__all__ = [
    "EmployeeRepository",
    "InMemoryEmployeeRepository",
    "JsonFileEmployeeRepository",
    "SqlEmployeeRepository",
]
