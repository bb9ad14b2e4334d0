# type: ignore
"""
Webhook client and notification dispatcher tests.
Run:  pytest test_notification.py -v
"""
from datetime import date, datetime, timezone
from unittest.mock import MagicMock, patch

import httpx
import pytest

from employee_directory.exceptions import (
    InternalError, NotFoundError, ServiceUnavailableError, UpstreamError,
)
from employee_directory.repositories import InMemoryEmployeeRepository
from employee_directory.services.employee_service import EmployeeService
from employee_directory.services.notification_dispatcher import (
    NotificationDispatcher, build_payload,
)
from employee_directory.services.webhook_client import (
    WebhookClient, WebhookDelivered, WebhookFailed, WebhookRejected,
    WebhookUnreachable,
)

URL = "http://hooks.example.com/send-email"


def _mock_httpx_client(post_return=None, post_side_effect=None):
    mock_client = MagicMock()
    mock_client.post.return_value = post_return
    mock_client.post.side_effect = post_side_effect
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    return mock_client


def _response(status_code, **kwargs):
    return httpx.Response(status_code, request=httpx.Request("POST", URL), **kwargs)


# ═══════════════════════════════════════════════════════════════════════════
# WEBHOOK CLIENT OUTCOMES
# ═══════════════════════════════════════════════════════════════════════════
class TestWebhookClient:
    def test_delivered_json_body(self):
        mc = _mock_httpx_client(post_return=_response(200, json={"sent": True}))
        with patch("httpx.Client", return_value=mc) as ctor:
            outcome = WebhookClient(URL, timeout=10.0).post({"a": 1})
        assert outcome == WebhookDelivered(status_code=200, body={"sent": True})
        ctor.assert_called_once_with(timeout=10.0)
        assert mc.post.call_args.kwargs["json"] == {"a": 1}

    def test_delivered_text_body(self):
        mc = _mock_httpx_client(post_return=_response(200, text="Workflow started"))
        with patch("httpx.Client", return_value=mc):
            outcome = WebhookClient(URL).post({})
        assert outcome == WebhookDelivered(status_code=200, body="Workflow started")

    def test_connection_refused_is_unreachable(self):
        mc = _mock_httpx_client(post_side_effect=httpx.ConnectError("refused"))
        with patch("httpx.Client", return_value=mc):
            outcome = WebhookClient(URL).post({})
        assert isinstance(outcome, WebhookUnreachable)

    def test_error_status_is_rejected(self):
        mc = _mock_httpx_client(post_return=_response(404))
        with patch("httpx.Client", return_value=mc):
            outcome = WebhookClient(URL).post({})
        assert outcome == WebhookRejected(status_code=404, reason="Not Found")

    def test_timeout_is_failed(self):
        mc = _mock_httpx_client(post_side_effect=httpx.ReadTimeout("slow"))
        with patch("httpx.Client", return_value=mc):
            outcome = WebhookClient(URL).post({})
        assert isinstance(outcome, WebhookFailed)

    def test_default_timeout_is_ten_seconds(self):
        assert WebhookClient(URL).timeout == 10.0


# ═══════════════════════════════════════════════════════════════════════════
# DISPATCHER
# ═══════════════════════════════════════════════════════════════════════════
@pytest.fixture
def employee_service():
    return EmployeeService(InMemoryEmployeeRepository())


@pytest.fixture
def employee(employee_service):
    return employee_service.repository.create({
        "name": "Grace", "position": "Admiral", "email": "grace@navy.mil",
        "department": "Navy", "phone": "", "start_date": date(2024, 1, 1),
        "salary": 10, "status": "active",
    })


def _dispatcher(employee_service, outcome):
    hook = MagicMock(spec=WebhookClient)
    hook.post.return_value = outcome
    return NotificationDispatcher(employee_service, hook), hook


class TestNotificationDispatcher:
    def test_build_payload(self, employee):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        payload = build_payload(employee, now=now)
        assert payload == {
            "employee": {
                "id": employee.id, "name": "Grace", "email": "grace@navy.mil",
                "position": "Admiral", "department": "Navy",
            },
            "emailType": "general",
            "customMessage": "",
            "timestamp": "2026-01-01T00:00:00+00:00",
        }

    def test_delivered(self, employee_service, employee):
        dispatcher, hook = _dispatcher(employee_service, WebhookDelivered(200, {"ok": 1}))
        result = dispatcher.send(employee.id, "reminder", "hello")
        assert result.data == {"ok": 1}
        assert result.employee_name == "Grace"
        sent = hook.post.call_args[0][0]
        assert sent["emailType"] == "reminder"
        assert sent["customMessage"] == "hello"

    def test_unknown_employee(self, employee_service):
        dispatcher, hook = _dispatcher(employee_service, WebhookDelivered(200, None))
        with pytest.raises(NotFoundError):
            dispatcher.send("ghost")
        hook.post.assert_not_called()

    def test_unreachable(self, employee_service, employee):
        dispatcher, _ = _dispatcher(employee_service, WebhookUnreachable("refused"))
        with pytest.raises(ServiceUnavailableError) as exc:
            dispatcher.send(employee.id)
        assert exc.value.status_code == 503

    def test_rejected_passes_status(self, employee_service, employee):
        dispatcher, _ = _dispatcher(employee_service, WebhookRejected(502, "Bad Gateway"))
        with pytest.raises(UpstreamError) as exc:
            dispatcher.send(employee.id)
        assert exc.value.status_code == 502

    def test_failed(self, employee_service, employee):
        dispatcher, hook = _dispatcher(employee_service, WebhookFailed("timeout"))
        with pytest.raises(InternalError) as exc:
            dispatcher.send(employee.id)
        assert exc.value.message == "Failed to send email"
        assert hook.post.call_count == 1
