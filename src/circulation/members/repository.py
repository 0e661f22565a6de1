"""User repositories."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import User


class UserRepository(ABC):
    """Storage for registered users."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Store a user."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the first user registered under ``user_id``, if any."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user in registration order."""


class InMemoryUserRepository(UserRepository):
    """List-backed user repository. Duplicate ids shadow later registrations."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add(self, user: User) -> None:
        self._users.append(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def list_all(self) -> list[User]:
        return list(self._users)
