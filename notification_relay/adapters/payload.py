"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (JSON request bodies) into the internal
  request dictionary used by application/domain code.
- It validates shape and required fields, but it does not decide delivery
  outcomes.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from ..types import Request, RequestDict

SEND_MISSING_FIELDS_ERROR = "Missing required fields: to, subject, and either text or html"


class MissingFieldsError(ValueError):
    """Raised when an HTTP `/send` body lacks required fields."""


def decode_json_body(raw: bytes | str | Mapping[str, Any] | None) -> dict[str, Any]:
    """Decode a JSON-encoded request body into a dictionary."""
    if isinstance(raw, Mapping):
        return dict(raw)

    if raw is None:
        raise ValueError("Request body is empty")
    if isinstance(raw, bytes):
        text = raw.decode("utf-8")
    elif isinstance(raw, str):
        text = raw
    else:
        raise ValueError(f"Unsupported request body type: {type(raw).__name__}")

    if not text.strip():
        raise ValueError("Request body is empty")
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("Request body must decode to a JSON object")
    return parsed


def parse_email_request(payload: Request) -> RequestDict:
    """Normalize a function-style email body.

    Accepts both `senderName` (as clients send it) and `sender_name`.
    """
    return {
        "to": _as_required_str(payload.get("to"), "to"),
        "from": _as_optional_str(payload.get("from")),
        "sender_name": _as_optional_str(
            payload.get("senderName", payload.get("sender_name"))
        ),
        "subject": _as_optional_str(payload.get("subject")),
        "content": _as_required_text(payload.get("content"), "content"),
        "html": None,
    }


def parse_sms_request(payload: Request) -> RequestDict:
    """Normalize a function-style SMS body."""
    return {
        "to": _as_required_str(payload.get("to"), "to"),
        "from": _as_optional_str(payload.get("from")),
        "content": _as_required_text(payload.get("content"), "content"),
    }


def parse_send_request(payload: Request) -> RequestDict:
    """Validate and normalize an HTTP `/send` body.

    The caller's `html` is sent as-is and defaults to `text`; no template is
    applied on this path.
    """
    to_email = _as_optional_str(payload.get("to"))
    subject = _as_optional_str(payload.get("subject"))
    text = _as_optional_text(payload.get("text"))
    html_body = _as_optional_text(payload.get("html"))
    if not to_email or not subject or (not text and not html_body):
        raise MissingFieldsError(SEND_MISSING_FIELDS_ERROR)

    return {
        "to": to_email,
        "from": _as_optional_str(payload.get("from")),
        "sender_name": None,
        "subject": subject,
        "content": text or "",
        "html": html_body or text,
    }


def _as_required_str(value: Any, field_name: str) -> str:
    text = _as_optional_str(value)
    if not text:
        raise ValueError(f"Missing required field: {field_name}")
    return text


def _as_optional_str(value: Any) -> str | None:
    # Lists, objects and other JSON non-strings count as missing.
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _as_required_text(value: Any, field_name: str) -> str:
    text = _as_optional_text(value)
    if text is None:
        raise ValueError(f"Missing required field: {field_name}")
    return text


def _as_optional_text(value: Any) -> str | None:
    # Message bodies keep their whitespace; only an all-blank body counts as missing.
    if not isinstance(value, str):
        return None
    return value if value.strip() else None
