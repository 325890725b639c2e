"""Domain layer: entities and value objects. No dependencies on outer layers."""

from kinboard.domain.errors import ValidationError
from kinboard.domain.kanban_board import DEFAULT_STATUSES, KanbanBoard
from kinboard.domain.names import ParsedName, parse_full_name
from kinboard.domain.person import Person, create_person

__all__ = [
    "DEFAULT_STATUSES",
    "KanbanBoard",
    "ParsedName",
    "Person",
    "ValidationError",
    "create_person",
    "parse_full_name",
]
