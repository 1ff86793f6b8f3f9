"""Shared test doubles."""

from __future__ import annotations

from typing import Any

from notification_relay.config import RelaySettings


class RecordingEvents:
    def __init__(self) -> None:
        self.sent_events: list[dict[str, Any]] = []
        self.failed_events: list[dict[str, Any]] = []

    def sent(self, *, channel: str, to: str, provider_message_id: str | None) -> None:
        self.sent_events.append(
            {"channel": channel, "to": to, "provider_message_id": provider_message_id}
        )

    def failed(self, *, channel: str, to: str | None, error: str) -> None:
        self.failed_events.append({"channel": channel, "to": to, "error": error})


def make_settings(**overrides: Any) -> RelaySettings:
    base: dict[str, Any] = {
        "email_user": "relay@example.com",
        "email_pass": "app-password",
        "textbelt_key": "test-key",
        "smtp_verify_on_startup": False,
    }
    return RelaySettings(_env_file=None, **(base | overrides))
