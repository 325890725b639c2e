"""Infrastructure layer: concrete implementations of application ports."""

from kinboard.infrastructure.board_loader import (
    get_boards_path,
    load_boards,
    parse_boards,
)
from kinboard.infrastructure.memory_repository import (
    InMemoryBoardRepository,
    InMemoryPersonRepository,
)

__all__ = [
    "InMemoryBoardRepository",
    "InMemoryPersonRepository",
    "get_boards_path",
    "load_boards",
    "parse_boards",
]
