"""Application orchestration for one notification dispatch.

Mental model refresher:
- Application layer coordinates the use-case flow across domain modules.
- In this project it:
  1) selects the channel for a request
  2) calls exactly one channel's domain logic
  3) hands back that channel's result envelope untouched
- There is no retry, batching or queueing here; one request means one
  outbound call.
"""

from __future__ import annotations

from ..domain.email import DEFAULT_BRAND_NAME, send_email_notification
from ..domain.result import failure_result
from ..domain.sms import send_sms_notification
from ..types import (
    CHANNELS,
    DispatchEvents,
    NotificationResult,
    Request,
    SendEmailFn,
    SendSMSFn,
)


def dispatch_notification(
    request: Request,
    channel: str,
    *,
    events: DispatchEvents,
    send_email: SendEmailFn | None = None,
    send_sms: SendSMSFn | None = None,
    brand: str = DEFAULT_BRAND_NAME,
) -> NotificationResult:
    """Execute the notification use-case for one normalized request.

    Only the sender for the selected channel is needed; a channel without a
    sender fails without any outbound call.
    """
    if channel == "email" and send_email is not None:
        return send_email_notification(request, send_email, events, brand=brand)
    if channel == "sms" and send_sms is not None:
        return send_sms_notification(request, send_sms, events)

    if channel in CHANNELS:
        error = f"No sender configured for channel {channel!r}"
    else:
        error = f"Unsupported channel {channel!r}; expected one of {', '.join(CHANNELS)}"
    events.failed(channel=str(channel), to=request.get("to"), error=error)
    return failure_result(error)
