"""Pytest configuration and shared fixtures.

Provides fresh repositories, a service wired to a recording notifier, and
a console that writes to memory so notification lines can be inspected.
"""

import io
import os
from datetime import datetime
from typing import Generator

import pytest
from rich.console import Console

from circulation.catalog.repository import InMemoryBookRepository
from circulation.config import reset_config
from circulation.lending.fees import FeeCalculator
from circulation.lending.repository import InMemoryLoanRepository
from circulation.members.repository import InMemoryUserRepository
from circulation.notifications.schemas import Notification
from circulation.service import LibraryService


class RecordingNotifier:
    """Stands in for a notifier, keeping every notification instead of printing it."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    def notify(self, recipient: str, subject: str, message: str) -> None:
        self.sent.append(Notification(recipient=recipient, subject=subject, message=message))


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Drop cached config and CIRCULATION_* variables around each test."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("CIRCULATION_")}
    for key in saved:
        del os.environ[key]
    reset_config()
    yield
    reset_config()
    for key in [k for k in os.environ if k.startswith("CIRCULATION_")]:
        del os.environ[key]
    os.environ.update(saved)


# ============================================================================
# Output Fixtures
# ============================================================================


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def recorder() -> RecordingNotifier:
    """Notifier recording what it was asked to send."""
    return RecordingNotifier()


@pytest.fixture
def make_recorder():
    """Factory for additional recording notifiers."""
    return RecordingNotifier


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def books() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def loans() -> InMemoryLoanRepository:
    return InMemoryLoanRepository()


@pytest.fixture
def service(books, users, loans, recorder) -> LibraryService:
    """Service over empty repositories, notifying through ``recorder``."""
    return LibraryService(books, users, loans, [recorder], FeeCalculator(1.0))


@pytest.fixture
def stocked_service(service: LibraryService, recorder: RecordingNotifier) -> LibraryService:
    """Service with book "123" and user 1 registered, notifications cleared."""
    service.register_book("Clean Code", "Robert C. Martin", "123")
    service.register_user("João", 1)
    recorder.sent.clear()
    return service


@pytest.fixture
def day_one() -> datetime:
    return datetime(2025, 3, 1, 10, 0, 0)
