"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from kinboard.domain import KanbanBoard, Person


class PersonRepository(Protocol):
    """Keeps Person entities by id."""

    def add(self, person: Person) -> None:
        """Store a person. Adding the same id twice is a no-op."""
        ...

    def get_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    def list_all(self) -> list[Person]:
        """Return all people in insertion order."""
        ...


class BoardRepository(Protocol):
    """Keeps KanbanBoard entities by name."""

    def add(self, board: KanbanBoard) -> None:
        """Store a board. Adding a name that already exists is a no-op."""
        ...

    def get_by_name(self, name: str) -> KanbanBoard | None:
        """Return the board with the given name, or None."""
        ...

    def list_all(self) -> list[KanbanBoard]:
        """Return all boards in insertion order."""
        ...
