"""
kinboard core: clean-architecture layout.

- domain: entities (Person, KanbanBoard), name parsing, ValidationError.
- application: use cases (PeopleService, BoardService), ports, DTOs.
- infrastructure: adapters (in-memory repositories, YAML board loader).
"""

from kinboard.application import (
    BoardCreated,
    BoardNotFound,
    BoardService,
    Duplicate,
    FriendshipChanged,
    Invalid,
    PeopleService,
    PersonNotFound,
    PersonRegistered,
    StatusesChanged,
)
from kinboard.domain import (
    DEFAULT_STATUSES,
    KanbanBoard,
    Person,
    ValidationError,
    create_person,
)
from kinboard.infrastructure import (
    InMemoryBoardRepository,
    InMemoryPersonRepository,
    load_boards,
)

__all__ = [
    "BoardCreated",
    "BoardNotFound",
    "BoardService",
    "DEFAULT_STATUSES",
    "Duplicate",
    "FriendshipChanged",
    "InMemoryBoardRepository",
    "InMemoryPersonRepository",
    "Invalid",
    "KanbanBoard",
    "PeopleService",
    "Person",
    "PersonNotFound",
    "PersonRegistered",
    "StatusesChanged",
    "ValidationError",
    "create_person",
    "load_boards",
]
