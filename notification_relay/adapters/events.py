"""Logging-backed dispatch event sink."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingEvents:
    """Write dispatch outcomes to a logger.

    Each record carries `channel`, `to` and either `provider_message_id` or
    `error` as `extra` fields so structured handlers can pick them up.
    """

    def __init__(self, event_logger: logging.Logger | None = None) -> None:
        self._logger = event_logger or logger

    def sent(self, *, channel: str, to: str, provider_message_id: str | None) -> None:
        self._logger.info(
            "%s sent successfully to %s",
            channel,
            to,
            extra={"channel": channel, "to": to, "provider_message_id": provider_message_id},
        )

    def failed(self, *, channel: str, to: str | None, error: str) -> None:
        self._logger.error(
            "Error sending %s to %s: %s",
            channel,
            to,
            error,
            extra={"channel": channel, "to": to, "error": error},
        )