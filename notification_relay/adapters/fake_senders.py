"""Fake sender adapters for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider calls live (SMTP, SMS gateway).
- Domain code calls these through injected functions; domain does not know which
  provider implementation is underneath.
"""

from __future__ import annotations

import uuid
from typing import Any


def send_email_via_console(
    *,
    to_email: str,
    subject: str,
    text_body: str,
    html_body: str | None = None,
    from_header: str | None = None,
) -> dict[str, Any]:
    message_id = f"<console-{uuid.uuid4().hex}@localhost>"
    print("[EMAIL]")
    print(f"from={from_header}")
    print(f"to={to_email}")
    print(f"subject={subject}")
    print(f"text={text_body}")
    print(f"html_chars={len(html_body or '')}")
    return {"message_id": message_id, "accepted": [to_email]}


def send_sms_via_console(*, to_phone: str, message: str) -> dict[str, Any]:
    print("[SMS]")
    print(f"to={to_phone}")
    print(f"message={message}")
    return {"success": True, "textId": f"console-{uuid.uuid4().hex[:12]}", "quotaRemaining": None}
