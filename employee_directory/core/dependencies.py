# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — services live on ``app.state``, wired once by
``main.create_app``.
"""

from dataclasses import dataclass

from fastapi import Request

from employee_directory.core.config import Settings
from employee_directory.repositories.base import EmployeeRepository
from employee_directory.services.employee_service import EmployeeService
from employee_directory.services.notification_dispatcher import NotificationDispatcher
from employee_directory.services.webhook_client import WebhookClient


@dataclass
class Container:
    repository: EmployeeRepository
    employee_service: EmployeeService
    dispatcher: NotificationDispatcher


def build_container(repository: EmployeeRepository, webhook: WebhookClient) -> Container:
    employee_service = EmployeeService(repository)
    return Container(
        repository=repository,
        employee_service=employee_service,
        dispatcher=NotificationDispatcher(employee_service, webhook),
    )


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_employee_service(request: Request) -> EmployeeService:
    return get_container(request).employee_service


def get_dispatcher(request: Request) -> NotificationDispatcher:
    return get_container(request).dispatcher


def get_repository(request: Request) -> EmployeeRepository:
    return get_container(request).repository


def get_settings(request: Request) -> Settings:
    return request.app.state.config
