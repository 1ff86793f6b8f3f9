"""Application layer: dispatch orchestration."""

from .dispatch import dispatch_notification

__all__ = ["dispatch_notification"]
