# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: send an email to an employee through the workflow webhook."""
from fastapi import APIRouter, Depends

from employee_directory.core.dependencies import get_dispatcher
from employee_directory.exceptions import ValidationError
from employee_directory.schemas import SendEmailRequest, SendEmailResponse
from employee_directory.services.notification_dispatcher import NotificationDispatcher

router = APIRouter(prefix="/api", tags=["Notifications"])


@router.post("/send-email", response_model=SendEmailResponse)
def send_email(body: SendEmailRequest,
               dispatcher: NotificationDispatcher = Depends(get_dispatcher)):
    employee_id = "" if body.employee_id is None else str(body.employee_id).strip()
    if not employee_id:
        raise ValidationError({"employeeId": "Employee ID is required"},
                              message="Employee ID is required")
    result = dispatcher.send(employee_id, body.email_type, body.custom_message)
    return SendEmailResponse(
        message="Email sent successfully",
        data=result.data,
        employee=result.employee_name,
    )
