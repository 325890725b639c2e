"""In-memory implementations of PersonRepository and BoardRepository (no DB)."""

from kinboard.domain import KanbanBoard, Person


class InMemoryPersonRepository:
    """Stores people in memory. Order preserved by insertion.
    Holds strong references, so friendships between stored people stay alive.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Person] = {}

    def add(self, person: Person) -> None:
        if person.id in self._by_id:
            return
        self._by_id[person.id] = person

    def get_by_id(self, person_id: str) -> Person | None:
        return self._by_id.get(person_id)

    def list_all(self) -> list[Person]:
        return list(self._by_id.values())


class InMemoryBoardRepository:
    """Stores boards in memory keyed by name. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_name: dict[str, KanbanBoard] = {}

    def add(self, board: KanbanBoard) -> None:
        if board.name in self._by_name:
            return
        self._by_name[board.name] = board

    def get_by_name(self, name: str) -> KanbanBoard | None:
        return self._by_name.get(name)

    def list_all(self) -> list[KanbanBoard]:
        return list(self._by_name.values())
