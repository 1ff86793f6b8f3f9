"""Email channel rules.

Mental model refresher:
- Domain modules hold channel rules.
- They decide what should be sent for this channel:
  - which sender header to use?
  - what plain-text and HTML bodies to render?
  - how does a sender outcome map onto the result envelope?
- They do not open SMTP sessions or decode request bodies.
"""

from __future__ import annotations

import html

from ..types import DispatchEvents, NotificationResult, Request, SendEmailFn
from .result import failure_result, success_result

DEFAULT_BRAND_NAME = "Notification Relay"

_HTML_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #2196F3;">{brand} Message</h2>
  <p><strong>From:</strong> {sender_name}</p>
  <p><strong>Subject:</strong> {subject}</p>
  <hr style="border: 1px solid #eee;">
  <p>{content}</p>
  <hr style="border: 1px solid #eee;">
  <p style="font-size: 12px; color: #666;">
    This message was sent through the {brand} platform.
    Reply directly to this email or log in to the platform to respond.
  </p>
</div>
"""


def render_html_body(
    *,
    content: str,
    sender_name: str | None = None,
    subject: str | None = None,
    brand: str = DEFAULT_BRAND_NAME,
) -> str:
    """Wrap message content in the styled HTML block.

    Interpolated values are escaped; newlines in `content` become `<br>`.
    """
    return _HTML_TEMPLATE.format(
        brand=html.escape(brand),
        sender_name=html.escape(sender_name or ""),
        subject=html.escape(subject or ""),
        content=html.escape(content).replace("\n", "<br>"),
    )


def format_from_header(from_email: str, sender_name: str | None = None) -> str:
    if not sender_name:
        return from_email
    escaped_name = sender_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped_name}" <{from_email}>'


def send_email_notification(
    request: Request,
    send_email: SendEmailFn,
    events: DispatchEvents,
    *,
    brand: str = DEFAULT_BRAND_NAME,
) -> NotificationResult:
    """Run email-channel rules and return the result envelope.

    `request` is a normalized email request (see `adapters.payload`). When it
    carries its own `html` body that body is sent as-is; otherwise the HTML
    variant is rendered from `content`.
    """
    to_email = request.get("to")
    content = request.get("content") or ""
    html_body = request.get("html")
    if html_body is None:
        html_body = render_html_body(
            content=content,
            sender_name=request.get("sender_name"),
            subject=request.get("subject"),
            brand=brand,
        )

    from_email = request.get("from")
    from_header = format_from_header(from_email, request.get("sender_name")) if from_email else None

    try:
        if not to_email:
            raise ValueError("Missing recipient address: to")
        receipt = send_email(
            to_email=to_email,
            from_header=from_header,
            subject=request.get("subject") or "",
            text_body=content,
            html_body=html_body,
        )
        message_id = receipt.get("message_id")
        if not message_id:
            raise RuntimeError("Mail provider returned no message id")
    except Exception as exc:
        error = str(exc) or exc.__class__.__name__
        events.failed(channel="email", to=to_email, error=error)
        return failure_result(error)

    events.sent(channel="email", to=to_email, provider_message_id=message_id)
    return success_result(message_id, accepted=list(receipt.get("accepted") or []))
