"""KanbanBoard entity: a named board with an ordered set of unique statuses."""

from collections.abc import Iterable

DEFAULT_STATUSES = ("Backlog", "Ready", "In Progress", "Done")


class KanbanBoard:
    """
    A board with workflow status labels. Statuses keep insertion order and are
    unique; there are no transition rules between them.
    """

    def __init__(self, name: str, statuses: Iterable[str] | None = None) -> None:
        self.name = name
        # dict keys: ordered and unique
        self._statuses: dict[str, None] = dict.fromkeys(
            DEFAULT_STATUSES if statuses is None else statuses
        )

    @property
    def statuses(self) -> tuple[str, ...]:
        return tuple(self._statuses)

    def has_status(self, label: str) -> bool:
        return label in self._statuses

    def add_status(self, label: str) -> None:
        self._statuses.setdefault(label, None)

    def remove_status(self, label: str) -> None:
        self._statuses.pop(label, None)

    def __repr__(self) -> str:
        return f"KanbanBoard(name={self.name!r}, statuses={self.statuses!r})"
