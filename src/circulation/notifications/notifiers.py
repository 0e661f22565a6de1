"""Notification channels.

Each channel formats a notification as a single tagged line on its console.
No channel reports delivery status; every send is assumed to succeed.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from rich.console import Console

from .schemas import Notification

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Base class for notification channels."""

    channel: str = "unknown"

    def __init__(self, console: Optional[Console] = None):
        """Initialize notifier.

        Args:
            console: Output sink (default: stdout)
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, notification: Notification) -> str:
        """Render a notification as one line of output."""

    def notify(self, recipient: str, subject: str, message: str) -> None:
        """Send a notification to ``recipient``."""
        notification = Notification(recipient=recipient, subject=subject, message=message)
        logger.debug("%s -> %s: %s", self.channel, recipient, subject)
        self.console.print(
            self.format(notification), markup=False, emoji=False, highlight=False, soft_wrap=True
        )


class EmailNotifier(Notifier):
    """Email-style channel; includes the subject line."""

    channel = "email"

    def format(self, notification: Notification) -> str:
        return (
            f"[Email] To: {notification.recipient} | "
            f"Subject: {notification.subject} | "
            f"Msg: {notification.message}"
        )


class SMSNotifier(Notifier):
    """SMS-style channel; the subject is dropped."""

    channel = "sms"

    def format(self, notification: Notification) -> str:
        return f"[SMS] To: {notification.recipient} | Msg: {notification.message}"


class Broadcaster:
    """Delivers every notification to each registered notifier in order."""

    def __init__(self, notifiers: Optional[Iterable[Notifier]] = None):
        self.notifiers: list[Notifier] = list(notifiers or [])

    def __len__(self) -> int:
        return len(self.notifiers)

    def add(self, notifier: Notifier) -> None:
        """Register another channel after the existing ones."""
        self.notifiers.append(notifier)

    def notify(self, recipient: str, subject: str, message: str) -> None:
        """Send the same notification through every channel."""
        for notifier in self.notifiers:
            notifier.notify(recipient, subject, message)


NOTIFIER_CHANNELS: dict[str, type[Notifier]] = {
    EmailNotifier.channel: EmailNotifier,
    SMSNotifier.channel: SMSNotifier,
}


def build_notifiers(
    channels: Iterable[str], console: Optional[Console] = None
) -> list[Notifier]:
    """Create notifiers for the named channels, preserving order.

    Args:
        channels: Channel names, e.g. ``["email", "sms"]``
        console: Output sink shared by every notifier

    Raises:
        ValueError: If a channel name is not known
    """
    notifiers = []
    for name in channels:
        key = name.strip().lower()
        if key not in NOTIFIER_CHANNELS:
            raise ValueError(f"Unknown notifier channel: {name}")
        notifiers.append(NOTIFIER_CHANNELS[key](console))
    return notifiers
