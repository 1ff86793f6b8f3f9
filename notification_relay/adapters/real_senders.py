"""Real provider adapters for production sending.

Mental model refresher:
- This module is an outbound adapter.
- It integrates with external providers using the injected `RelaySettings`.
- Domain/application code only sees simple callable sender functions, built
  here by `make_email_sender` and `make_sms_sender`.
"""

from __future__ import annotations

import json
import logging
import smtplib
import urllib.error
import urllib.parse
import urllib.request
from email.message import EmailMessage
from email.utils import formatdate, make_msgid, parseaddr
from functools import partial
from typing import Any

from ..config import RelaySettings
from ..types import SendEmailFn, SendSMSFn

logger = logging.getLogger(__name__)


def send_email_via_smtp(
    settings: RelaySettings,
    *,
    to_email: str,
    subject: str,
    text_body: str,
    html_body: str | None = None,
    from_header: str | None = None,
) -> dict[str, Any]:
    """Submit one message over an authenticated SMTP session.

    Returns the generated Message-ID and the recipients the server accepted.
    """
    if not settings.smtp_configured:
        raise RuntimeError("EMAIL_USER and EMAIL_PASS must be configured")
    sender = from_header or settings.default_sender
    if not sender:
        raise RuntimeError("No sender address: set EMAIL_FROM or pass `from`")

    message = build_email_message(
        to_email=to_email,
        from_header=sender,
        subject=subject,
        text_body=text_body,
        html_body=html_body,
    )

    with _open_smtp_session(settings) as session:
        refused = session.send_message(message)

    accepted = [to_email] if to_email not in (refused or {}) else []
    return {"message_id": message["Message-ID"], "accepted": accepted}


def send_sms_via_textbelt(
    settings: RelaySettings,
    *,
    to_phone: str,
    message: str,
) -> dict[str, Any]:
    """POST one text to the SMS gateway and return its decoded JSON reply."""
    if settings.textbelt_key is None:
        raise RuntimeError("TEXTBELT_KEY must be configured")

    payload = urllib.parse.urlencode(
        {
            "phone": to_phone,
            "message": message,
            "key": settings.textbelt_key.get_secret_value(),
        }
    ).encode("utf-8")

    request = urllib.request.Request(settings.textbelt_url, data=payload, method="POST")
    request.add_header("Content-Type", "application/x-www-form-urlencoded")
    request.add_header("Accept", "application/json")

    try:
        with urllib.request.urlopen(request, timeout=settings.sms_timeout_seconds) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        details = exc.read().decode("utf-8", errors="replace")
        gateway_reply = _decode_gateway_reply(details)
        if gateway_reply is not None:
            return gateway_reply
        raise RuntimeError(f"SMS gateway request failed HTTP {exc.code}: {details[:300]}") from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"SMS gateway request failed: {exc.reason}") from exc

    gateway_reply = _decode_gateway_reply(body.decode("utf-8", errors="replace"))
    if gateway_reply is None:
        raise RuntimeError("SMS gateway returned a non-JSON response")
    return gateway_reply


def verify_smtp_connection(settings: RelaySettings) -> bool:
    """Log in to the SMTP server once and report whether it worked.

    Advisory only: callers log the outcome and keep serving.
    """
    if not settings.smtp_configured:
        logger.warning("SMTP credentials not configured; skipping connection check")
        return False
    try:
        with _open_smtp_session(settings) as session:
            session.noop()
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("SMTP connection error: %s", exc)
        return False
    logger.info("SMTP server %s:%s is ready to send emails", settings.smtp_host, settings.smtp_port)
    return True


def make_email_sender(settings: RelaySettings) -> SendEmailFn:
    return partial(send_email_via_smtp, settings)


def make_sms_sender(settings: RelaySettings) -> SendSMSFn:
    return partial(send_sms_via_textbelt, settings)


def build_email_message(
    *,
    to_email: str,
    from_header: str,
    subject: str,
    text_body: str,
    html_body: str | None,
) -> EmailMessage:
    message = EmailMessage()
    message["From"] = from_header
    message["To"] = to_email
    message["Subject"] = subject
    message["Date"] = formatdate(localtime=False, usegmt=True)
    message["Message-ID"] = make_msgid(domain=_address_domain(from_header))

    if text_body:
        message.set_content(text_body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
    else:
        message.set_content(html_body or "", subtype="html")
    return message


def _open_smtp_session(settings: RelaySettings) -> smtplib.SMTP:
    password = settings.email_pass.get_secret_value() if settings.email_pass else ""
    if settings.smtp_use_ssl:
        session: smtplib.SMTP = smtplib.SMTP_SSL(
            settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout_seconds
        )
    else:
        session = smtplib.SMTP(
            settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout_seconds
        )
    try:
        if not settings.smtp_use_ssl:
            session.starttls()
        session.login(settings.email_user or "", password)
    except Exception:
        session.close()
        raise
    return session


def _address_domain(header: str) -> str | None:
    _name, address = parseaddr(header)
    if "@" not in address:
        return None
    return address.rsplit("@", 1)[1] or None


def _decode_gateway_reply(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None
