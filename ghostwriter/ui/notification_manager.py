"""
Notification Manager

Transient toast messages shown to the user. A toast hides itself after a fixed
duration when an asyncio loop is running; a newer toast replaces the current one.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from ghostwriter.core.constants import DEFAULT_TOAST_DURATION
from ghostwriter.core.logging_config import get_logger

logger = get_logger("ui.notifications")


class NotificationType(Enum):
    """Types of notifications."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """A notification."""
    notification_type: NotificationType
    message: str
    timestamp: datetime
    dismissed: bool = False


class NotificationManager:
    """
    Holds the visible toast and a bounded history.

    Listeners registered with ``add_listener`` are called with every new
    notification, which is how a front end (or the CLI) displays them.
    """

    def __init__(self, duration: float = DEFAULT_TOAST_DURATION, max_history: int = 50):
        self.duration = duration
        self.max_history = max_history
        self.current: Optional[Notification] = None
        self.history: List[Notification] = []
        self._listeners: List[Callable[[Notification], None]] = []
        self._timer: Optional[asyncio.TimerHandle] = None

    @property
    def visible(self) -> bool:
        return self.current is not None and not self.current.dismissed

    @property
    def message(self) -> str:
        return self.current.message if self.current else ""

    def add_listener(self, callback: Callable[[Notification], None]) -> None:
        self._listeners.append(callback)

    def show(
        self,
        message: str,
        notification_type: NotificationType = NotificationType.INFO
    ) -> Notification:
        """Show a toast, replacing any visible one."""
        notification = Notification(
            notification_type=notification_type,
            message=message,
            timestamp=datetime.now(),
        )
        if self.current is not None:
            self.current.dismissed = True
        self.current = notification

        self.history.append(notification)
        if len(self.history) > self.max_history:
            self.history = self.history[-self.max_history:]

        self._schedule_hide()
        logger.debug(f"Toast ({notification_type.value}): {message}")

        for callback in self._listeners:
            callback(notification)
        return notification

    def hide(self) -> None:
        if self.current is not None:
            self.current.dismissed = True
        self._cancel_timer()

    def _schedule_hide(self) -> None:
        self._cancel_timer()
        if self.duration <= 0:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: the toast stays until replaced or hidden
            return
        self._timer = loop.call_later(self.duration, self.hide)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
