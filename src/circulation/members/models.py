"""User record."""

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class User:
    """A registered library user. Immutable once created."""

    name: str
    user_id: int
