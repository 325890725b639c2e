"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from kinboard.application.board_service import BoardService
from kinboard.application.dto import (
    BoardCreated,
    BoardNotFound,
    BoardSummary,
    Duplicate,
    FriendshipChanged,
    Invalid,
    PersonNotFound,
    PersonRegistered,
    PersonSummary,
    StatusesChanged,
)
from kinboard.application.people_service import PeopleService
from kinboard.application.ports import BoardRepository, PersonRepository

__all__ = [
    "BoardCreated",
    "BoardNotFound",
    "BoardRepository",
    "BoardService",
    "BoardSummary",
    "Duplicate",
    "FriendshipChanged",
    "Invalid",
    "PeopleService",
    "PersonNotFound",
    "PersonRegistered",
    "PersonRepository",
    "PersonSummary",
    "StatusesChanged",
]
