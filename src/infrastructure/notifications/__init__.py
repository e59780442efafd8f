"""Notification delivery orchestration."""

from src.infrastructure.notifications.background_dispatcher import (
    BackgroundNotificationDispatcher,
)

__all__ = ["BackgroundNotificationDispatcher"]
