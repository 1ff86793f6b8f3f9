"""Shared type aliases for the notification relay package."""

from __future__ import annotations

from typing import Any, Callable, Literal, Mapping, Protocol

Channel = Literal["email", "sms"]
CHANNELS: tuple[Channel, ...] = ("email", "sms")

Request = Mapping[str, Any]
RequestDict = dict[str, Any]
NotificationResult = dict[str, Any]
FunctionResponse = dict[str, Any]

# Email senders return {"message_id": str, "accepted": list[str]}.
SendEmailFn = Callable[..., Mapping[str, Any]]
# SMS senders return the gateway's decoded JSON response.
SendSMSFn = Callable[..., Mapping[str, Any]]


class DispatchEvents(Protocol):
    """Sink for dispatch outcomes, injected into every channel call."""

    def sent(self, *, channel: str, to: str, provider_message_id: str | None) -> None: ...

    def failed(self, *, channel: str, to: str | None, error: str) -> None: ...
