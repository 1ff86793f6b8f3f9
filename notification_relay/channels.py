"""Compatibility facade for notification relay functions.

Module layout by abstraction layer:
- adapters: payload mapping, entry points and sender adapters
- domain: email/sms rules and the result envelope
- application: channel selection and dispatch
"""

from .adapters.events import LoggingEvents
from .adapters.fake_senders import send_email_via_console, send_sms_via_console
from .adapters.functions import (
    handle_email_function,
    handle_sms_function,
    invoke_email_function,
    invoke_sms_function,
)
from .adapters.http_app import create_app, run_server
from .adapters.payload import (
    decode_json_body,
    parse_email_request,
    parse_send_request,
    parse_sms_request,
)
from .adapters.real_senders import (
    make_email_sender,
    make_sms_sender,
    verify_smtp_connection,
)
from .application.dispatch import dispatch_notification
from .domain.email import render_html_body, send_email_notification
from .domain.sms import interpret_gateway_response, send_sms_notification

__all__ = [
    "LoggingEvents",
    "create_app",
    "decode_json_body",
    "dispatch_notification",
    "handle_email_function",
    "handle_sms_function",
    "interpret_gateway_response",
    "invoke_email_function",
    "invoke_sms_function",
    "make_email_sender",
    "make_sms_sender",
    "parse_email_request",
    "parse_send_request",
    "parse_sms_request",
    "render_html_body",
    "run_server",
    "send_email_notification",
    "send_email_via_console",
    "send_sms_notification",
    "send_sms_via_console",
    "verify_smtp_connection",
]
