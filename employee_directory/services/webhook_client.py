# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: outbound client for the email workflow webhook.
Every call returns exactly one outcome variant; nothing is raised.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from employee_directory.core.config import settings
from employee_directory.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WebhookDelivered:
    status_code: int
    body: Any


@dataclass(frozen=True)
class WebhookUnreachable:
    reason: str


@dataclass(frozen=True)
class WebhookRejected:
    status_code: int
    reason: str


@dataclass(frozen=True)
class WebhookFailed:
    reason: str


WebhookOutcome = Union[WebhookDelivered, WebhookUnreachable, WebhookRejected, WebhookFailed]


def _decode_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class WebhookClient:
    """Single-attempt JSON POST with a hard timeout."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url if url is not None else settings.WEBHOOK_URL
        self.timeout = timeout if timeout is not None else settings.WEBHOOK_TIMEOUT

    def post(self, payload: Dict[str, Any]) -> WebhookOutcome:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.ConnectError as exc:
            logger.warning("Webhook unreachable url=%s: %s", self.url, exc)
            return WebhookUnreachable(reason=str(exc))
        except httpx.HTTPError as exc:
            logger.warning("Webhook transport failure url=%s: %s", self.url, exc)
            return WebhookFailed(reason=str(exc) or type(exc).__name__)

        if resp.status_code >= 400:
            logger.warning("Webhook returned status=%d", resp.status_code)
            return WebhookRejected(status_code=resp.status_code,
                                   reason=resp.reason_phrase)
        return WebhookDelivered(status_code=resp.status_code, body=_decode_body(resp))
