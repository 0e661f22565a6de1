"""Library members (users) module."""

from .models import User
from .repository import InMemoryUserRepository, UserRepository

__all__ = [
    "User",
    "UserRepository",
    "InMemoryUserRepository",
]
