"""SMS channel rules.

Mental model refresher:
- Domain modules hold channel rules.
- For SMS that means:
  - how is the message text composed?
  - how is the gateway's JSON reply interpreted?
- The gateway call itself lives in `adapters.real_senders`.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..types import DispatchEvents, NotificationResult, Request, SendSMSFn
from .result import failure_result, success_result

SMS_FALLBACK_ERROR = "Failed to send SMS"
SMS_MISSING_ID_ERROR = "SMS gateway returned no textId"


def format_sms_message(from_label: str | None, content: str) -> str:
    return f"{from_label or ''}: {content}"


def interpret_gateway_response(response: Mapping[str, Any]) -> NotificationResult:
    """Map a TextBelt-style JSON reply onto the result envelope."""
    if response.get("success") is True:
        text_id = response.get("textId")
        if text_id is None or not str(text_id).strip():
            return failure_result(SMS_MISSING_ID_ERROR)
        return success_result(
            str(text_id),
            quota_remaining=response.get("quotaRemaining"),
        )
    error = response.get("error")
    return failure_result(str(error) if error else SMS_FALLBACK_ERROR)


def send_sms_notification(
    request: Request,
    send_sms: SendSMSFn,
    events: DispatchEvents,
) -> NotificationResult:
    """Run SMS-channel rules and return the result envelope."""
    phone = request.get("to")
    message = format_sms_message(request.get("from"), request.get("content") or "")

    try:
        if not phone:
            raise ValueError("Missing recipient phone number: to")
        response = send_sms(to_phone=phone, message=message)
        result = interpret_gateway_response(response)
    except Exception as exc:
        result = failure_result(str(exc) or exc.__class__.__name__)

    if result["success"]:
        events.sent(channel="sms", to=phone, provider_message_id=result["provider_message_id"])
    else:
        events.failed(channel="sms", to=phone, error=result["error"])
    return result
