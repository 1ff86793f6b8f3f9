"""Result envelope constructors.

Every dispatch ends in exactly one of these two shapes, so channel code never
builds the dictionaries by hand. A success always carries a provider id and
no error key; a failure always carries an error and no id key.
"""

from __future__ import annotations

from typing import Any

from ..types import NotificationResult


def success_result(provider_message_id: str | None, **extra: Any) -> NotificationResult:
    if not provider_message_id:
        raise ValueError("A successful dispatch requires a provider message id")
    result: NotificationResult = {
        "success": True,
        "provider_message_id": provider_message_id,
    }
    result.update(extra)
    return result


def failure_result(error: str) -> NotificationResult:
    return {
        "success": False,
        "error": error or "Unknown error",
    }
