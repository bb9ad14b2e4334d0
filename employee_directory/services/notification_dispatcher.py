# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: forwards an employee to the email workflow webhook and relays the outcome.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from employee_directory.core.logging import get_logger
from employee_directory.exceptions import (
    InternalError, ServiceUnavailableError, UpstreamError,
)
from employee_directory.metrics import EMAIL_DISPATCH, EMAIL_DISPATCH_LATENCY
from employee_directory.models.domain import Employee
from employee_directory.services.employee_service import EmployeeService
from employee_directory.services.webhook_client import (
    WebhookClient, WebhookDelivered, WebhookFailed, WebhookRejected,
    WebhookUnreachable,
)

logger = get_logger(__name__)

DEFAULT_EMAIL_TYPE = "general"


@dataclass(frozen=True)
class DispatchResult:
    data: Any
    employee_name: str


def build_payload(employee: Employee, email_type: Optional[str] = None,
                  custom_message: Optional[str] = None,
                  now: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "employee": {
            "id": employee.id,
            "name": employee.name,
            "email": employee.email,
            "position": employee.position,
            "department": employee.department,
        },
        "emailType": email_type or DEFAULT_EMAIL_TYPE,
        "customMessage": custom_message or "",
        "timestamp": (now or datetime.now(timezone.utc)).isoformat(),
    }


class NotificationDispatcher:
    def __init__(self, employee_service: EmployeeService, webhook: WebhookClient):
        self._employees = employee_service
        self._webhook = webhook

    def send(self, employee_id: str, email_type: Optional[str] = None,
             custom_message: Optional[str] = None) -> DispatchResult:
        """Look up the employee and make one webhook call. No retries."""
        employee = self._employees.get_employee(employee_id)
        payload = build_payload(employee, email_type, custom_message)

        start = time.time()
        outcome = self._webhook.post(payload)
        EMAIL_DISPATCH_LATENCY.observe(time.time() - start)

        if isinstance(outcome, WebhookDelivered):
            EMAIL_DISPATCH.labels(outcome="delivered").inc()
            logger.info("Email dispatched employee=%s type=%s status=%d",
                        employee.id, payload["emailType"], outcome.status_code)
            return DispatchResult(data=outcome.body, employee_name=employee.name)
        if isinstance(outcome, WebhookUnreachable):
            EMAIL_DISPATCH.labels(outcome="unreachable").inc()
            raise ServiceUnavailableError()
        if isinstance(outcome, WebhookRejected):
            EMAIL_DISPATCH.labels(outcome="rejected").inc()
            raise UpstreamError(outcome.status_code, outcome.reason)
        if isinstance(outcome, WebhookFailed):
            EMAIL_DISPATCH.labels(outcome="failed").inc()
            raise InternalError("Failed to send email")
        raise TypeError(f"Unexpected webhook outcome: {outcome!r}")
