"""Result types returned by the people and board services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PersonSummary:
    """One person as returned by list_people and list_friends."""

    person_id: str
    full_name: str
    first_name: str
    middle_name: str | None
    last_name: str | None
    created_at: datetime
    friend_count: int = 0


@dataclass(frozen=True)
class BoardSummary:
    """One board as returned by get_board and list_boards."""

    name: str
    statuses: tuple[str, ...]


@dataclass(frozen=True)
class Invalid:
    """Input was rejected (e.g. empty name or blank status label)."""

    reason: str


# --- people results ---


@dataclass(frozen=True)
class PersonRegistered:
    """Person was created and stored."""

    person_id: str
    full_name: str


@dataclass(frozen=True)
class PersonNotFound:
    """No person with the given id."""

    person_id: str


@dataclass(frozen=True)
class FriendshipChanged:
    """Friendship between the two people was added or removed (idempotent)."""

    person_id: str
    other_id: str
    are_friends: bool


# --- board results ---


@dataclass(frozen=True)
class BoardCreated:
    """Board was created with its seeded statuses."""

    name: str
    statuses: tuple[str, ...]


@dataclass(frozen=True)
class Duplicate:
    """A board with this name already exists."""

    name: str


@dataclass(frozen=True)
class BoardNotFound:
    """No board with the given name."""

    name: str


@dataclass(frozen=True)
class StatusesChanged:
    """Statuses of the board after an add or remove (no-ops included)."""

    name: str
    statuses: tuple[str, ...]
