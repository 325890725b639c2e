"""Create kanban boards and manage their statuses by board name."""

import logging
from collections.abc import Iterable

from kinboard.application.dto import (
    BoardCreated,
    BoardNotFound,
    BoardSummary,
    Duplicate,
    Invalid,
    StatusesChanged,
)
from kinboard.application.ports import BoardRepository
from kinboard.domain import KanbanBoard

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _summary(board: KanbanBoard) -> BoardSummary:
    return BoardSummary(name=board.name, statuses=board.statuses)


class BoardService:
    """Use cases over boards: create, add/remove status, list, import."""

    def __init__(
        self,
        repository: BoardRepository,
        *,
        default_statuses: Iterable[str] | None = None,
    ) -> None:
        self._repo = repository
        self._default_statuses = (
            tuple(default_statuses) if default_statuses is not None else None
        )

    def create_board(self, name: str) -> BoardCreated | Duplicate | Invalid:
        """Create a board seeded with the default statuses. Names are unique."""
        clean = _clean(name)
        if not clean:
            return Invalid(reason="Board name is required.")
        if self._repo.get_by_name(clean) is not None:
            return Duplicate(name=clean)
        board = KanbanBoard(clean, statuses=self._default_statuses)
        self._repo.add(board)
        logger.info("Created board %r with statuses %s", clean, board.statuses)
        return BoardCreated(name=board.name, statuses=board.statuses)

    def add_status(
        self, board_name: str, label: str
    ) -> StatusesChanged | BoardNotFound | Invalid:
        """Append a status to the board. Adding an existing label is a no-op."""
        clean = _clean(label)
        if not clean:
            return Invalid(reason="Status label is required.")
        board = self._repo.get_by_name(_clean(board_name))
        if board is None:
            return BoardNotFound(name=board_name)
        board.add_status(clean)
        logger.debug("Board %r statuses now %s", board.name, board.statuses)
        return StatusesChanged(name=board.name, statuses=board.statuses)

    def remove_status(
        self, board_name: str, label: str
    ) -> StatusesChanged | BoardNotFound:
        """Remove a status from the board. Missing labels are ignored."""
        board = self._repo.get_by_name(_clean(board_name))
        if board is None:
            return BoardNotFound(name=board_name)
        board.remove_status(_clean(label))
        logger.debug("Board %r statuses now %s", board.name, board.statuses)
        return StatusesChanged(name=board.name, statuses=board.statuses)

    def get_board(self, name: str) -> BoardSummary | None:
        """Return a board by name, or None if not found."""
        board = self._repo.get_by_name(_clean(name))
        if board is None:
            return None
        return _summary(board)

    def list_boards(self) -> list[BoardSummary]:
        return [_summary(board) for board in self._repo.list_all()]

    def import_boards(self, boards: Iterable[KanbanBoard]) -> list[str]:
        """Store boards (e.g. from load_boards). Returns names actually added."""
        added = []
        for board in boards:
            if self._repo.get_by_name(board.name) is not None:
                logger.warning("Skipping board %r: name already exists", board.name)
                continue
            self._repo.add(board)
            added.append(board.name)
        return added
