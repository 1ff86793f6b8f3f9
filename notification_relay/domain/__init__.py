"""Domain layer: channel-specific rules and the result envelope."""

from .email import render_html_body, send_email_notification
from .result import failure_result, success_result
from .sms import interpret_gateway_response, send_sms_notification

__all__ = [
    "failure_result",
    "interpret_gateway_response",
    "render_html_body",
    "send_email_notification",
    "send_sms_notification",
    "success_result",
]
