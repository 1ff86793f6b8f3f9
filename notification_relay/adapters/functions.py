"""Function-style entry points (serverless handlers).

Mental model refresher:
- These are controller-like entrypoints, one per channel.
- A function runtime calls them with the raw request body.
- Flow:
  raw body -> parse adapter -> application dispatch -> status code + JSON body
- Nothing escapes: decode, validation and provider errors all become the
  failure body with status 500.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..application.dispatch import dispatch_notification
from ..config import RelaySettings, get_settings
from ..domain.email import DEFAULT_BRAND_NAME
from ..domain.result import failure_result
from ..types import DispatchEvents, FunctionResponse, NotificationResult, SendEmailFn, SendSMSFn
from .events import LoggingEvents
from .payload import decode_json_body, parse_email_request, parse_sms_request
from .real_senders import make_email_sender, make_sms_sender

RawBody = bytes | str | Mapping[str, Any] | None


def handle_email_function(
    raw_body: RawBody,
    *,
    send_email: SendEmailFn,
    events: DispatchEvents,
    brand: str = DEFAULT_BRAND_NAME,
) -> FunctionResponse:
    """Handle one email invocation and return `{status_code, body}`."""
    try:
        request = parse_email_request(decode_json_body(raw_body))
    except Exception as exc:
        error = f"Invalid email request: {exc}"
        events.failed(channel="email", to=None, error=error)
        return _failure_response(failure_result(error))

    result = dispatch_notification(
        request, "email", send_email=send_email, events=events, brand=brand
    )
    if not result["success"]:
        return _failure_response(result)
    return {
        "status_code": 200,
        "body": {"success": True, "messageId": result["provider_message_id"]},
    }


def handle_sms_function(
    raw_body: RawBody,
    *,
    send_sms: SendSMSFn,
    events: DispatchEvents,
) -> FunctionResponse:
    """Handle one SMS invocation and return `{status_code, body}`."""
    try:
        request = parse_sms_request(decode_json_body(raw_body))
    except Exception as exc:
        error = f"Invalid SMS request: {exc}"
        events.failed(channel="sms", to=None, error=error)
        return _failure_response(failure_result(error))

    result = dispatch_notification(request, "sms", send_sms=send_sms, events=events)
    if not result["success"]:
        return _failure_response(result)
    return {
        "status_code": 200,
        "body": {
            "success": True,
            "textId": result["provider_message_id"],
            "quotaRemaining": result.get("quota_remaining"),
        },
    }


def invoke_email_function(
    raw_body: RawBody,
    settings: RelaySettings | None = None,
) -> FunctionResponse:
    """Run the email function against the configured SMTP provider."""
    settings = settings or get_settings()
    return handle_email_function(
        raw_body,
        send_email=make_email_sender(settings),
        events=LoggingEvents(),
        brand=settings.brand_name,
    )


def invoke_sms_function(
    raw_body: RawBody,
    settings: RelaySettings | None = None,
) -> FunctionResponse:
    """Run the SMS function against the configured gateway."""
    settings = settings or get_settings()
    return handle_sms_function(
        raw_body,
        send_sms=make_sms_sender(settings),
        events=LoggingEvents(),
    )


def _failure_response(result: NotificationResult) -> FunctionResponse:
    return {"status_code": 500, "body": {"success": False, "error": result["error"]}}
