"""Adapter layer: request mapping, entry points and sender implementations."""

from .events import LoggingEvents
from .fake_senders import send_email_via_console, send_sms_via_console
from .functions import (
    handle_email_function,
    handle_sms_function,
    invoke_email_function,
    invoke_sms_function,
)
from .http_app import create_app, run_server
from .payload import (
    MissingFieldsError,
    decode_json_body,
    parse_email_request,
    parse_send_request,
    parse_sms_request,
)
from .real_senders import (
    make_email_sender,
    make_sms_sender,
    send_email_via_smtp,
    send_sms_via_textbelt,
    verify_smtp_connection,
)

__all__ = [
    "LoggingEvents",
    "MissingFieldsError",
    "create_app",
    "decode_json_body",
    "handle_email_function",
    "handle_sms_function",
    "invoke_email_function",
    "invoke_sms_function",
    "make_email_sender",
    "make_sms_sender",
    "parse_email_request",
    "parse_send_request",
    "parse_sms_request",
    "run_server",
    "send_email_via_console",
    "send_email_via_smtp",
    "send_sms_via_console",
    "send_sms_via_textbelt",
    "verify_smtp_connection",
]
