"""User notifications.

Provides:
- Notifier channels (email, SMS) rendering to a console
- A broadcaster fanning each notification out to every channel
"""

from .notifiers import (
    NOTIFIER_CHANNELS,
    Broadcaster,
    EmailNotifier,
    Notifier,
    SMSNotifier,
    build_notifiers,
)
from .schemas import Notification

__all__ = [
    "NOTIFIER_CHANNELS",
    "Broadcaster",
    "EmailNotifier",
    "Notification",
    "Notifier",
    "SMSNotifier",
    "build_notifiers",
]
