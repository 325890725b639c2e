"""Person entity with symmetric friendships."""

import uuid
import weakref
from datetime import datetime, timezone

from kinboard.domain.errors import ValidationError
from kinboard.domain.names import parse_full_name


class Person:
    """
    A person identified by a full name, e.g. Person("Madonna Louise Cicone").
    Friendships are symmetric: add_friend and remove_friend update both sides.
    Friend sets hold weak references, so friends never keep each other alive.
    """

    def __init__(self, full_name: str) -> None:
        parsed = parse_full_name(full_name)
        self.id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now(timezone.utc)
        self.first_name: str = parsed.first_name
        self.middle_name: str | None = parsed.middle_name
        self.last_name: str | None = parsed.last_name
        self._full_name = parsed.full_name
        self._friends: weakref.WeakSet[Person] = weakref.WeakSet()

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def friends(self) -> frozenset["Person"]:
        """Snapshot of current friends. Mutate through add_friend/remove_friend."""
        return frozenset(self._friends)

    def is_friend(self, other: "Person") -> bool:
        return other in self._friends

    def add_friend(self, other: "Person") -> None:
        if other is self:
            raise ValidationError("A person cannot befriend themselves.")
        self._friends.add(other)
        other._friends.add(self)

    def remove_friend(self, other: "Person") -> None:
        self._friends.discard(other)
        other._friends.discard(self)

    def __repr__(self) -> str:
        return f"Person(full_name={self._full_name!r}, id={self.id!r})"


def create_person(full_name: str) -> Person:
    """Factory for Person. Raises ValidationError on an empty name."""
    return Person(full_name)
