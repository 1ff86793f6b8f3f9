"""Notification relay: email (SMTP) and SMS (HTTP gateway) dispatch."""

from .channels import (
    LoggingEvents,
    create_app,
    decode_json_body,
    dispatch_notification,
    handle_email_function,
    handle_sms_function,
    interpret_gateway_response,
    invoke_email_function,
    invoke_sms_function,
    make_email_sender,
    make_sms_sender,
    parse_email_request,
    parse_send_request,
    parse_sms_request,
    render_html_body,
    run_server,
    send_email_notification,
    send_email_via_console,
    send_sms_notification,
    send_sms_via_console,
    verify_smtp_connection,
)
from .config import RelaySettings, get_settings

__all__ = [
    "LoggingEvents",
    "RelaySettings",
    "create_app",
    "decode_json_body",
    "dispatch_notification",
    "get_settings",
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
