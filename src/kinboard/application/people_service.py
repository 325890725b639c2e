"""Register people and manage friendships between them by id."""

import logging

from kinboard.application.dto import (
    FriendshipChanged,
    Invalid,
    PersonNotFound,
    PersonRegistered,
    PersonSummary,
)
from kinboard.application.ports import PersonRepository
from kinboard.domain import Person, create_person

logger = logging.getLogger(__name__)


def _summary(person: Person) -> PersonSummary:
    return PersonSummary(
        person_id=person.id,
        full_name=person.full_name,
        first_name=person.first_name,
        middle_name=person.middle_name,
        last_name=person.last_name,
        created_at=person.created_at,
        friend_count=len(person.friends),
    )


class PeopleService:
    """Use cases over people: register, befriend, unfriend, list."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def register(self, full_name: str) -> PersonRegistered | Invalid:
        """Create a person from a full name and store it."""
        try:
            person = create_person(full_name)
        except ValueError as exc:
            return Invalid(reason=str(exc))
        self._repo.add(person)
        logger.info("Registered person %s (%s)", person.id, person.full_name)
        return PersonRegistered(person_id=person.id, full_name=person.full_name)

    def _pair(
        self, person_id: str, other_id: str
    ) -> tuple[Person, Person] | PersonNotFound:
        person = self._repo.get_by_id(person_id)
        if person is None:
            return PersonNotFound(person_id=person_id)
        other = self._repo.get_by_id(other_id)
        if other is None:
            return PersonNotFound(person_id=other_id)
        return person, other

    def befriend(
        self, person_id: str, other_id: str
    ) -> FriendshipChanged | PersonNotFound | Invalid:
        """Make two people friends (both directions). Idempotent."""
        pair = self._pair(person_id, other_id)
        if isinstance(pair, PersonNotFound):
            return pair
        person, other = pair
        try:
            person.add_friend(other)
        except ValueError as exc:
            return Invalid(reason=str(exc))
        logger.debug("Befriended %s and %s", person_id, other_id)
        return FriendshipChanged(
            person_id=person_id, other_id=other_id, are_friends=True
        )

    def unfriend(
        self, person_id: str, other_id: str
    ) -> FriendshipChanged | PersonNotFound:
        """Remove the friendship in both directions. No-op if not friends."""
        pair = self._pair(person_id, other_id)
        if isinstance(pair, PersonNotFound):
            return pair
        person, other = pair
        person.remove_friend(other)
        logger.debug("Unfriended %s and %s", person_id, other_id)
        return FriendshipChanged(
            person_id=person_id, other_id=other_id, are_friends=False
        )

    def list_friends(self, person_id: str) -> list[PersonSummary] | PersonNotFound:
        """Return the person's friends, ordered by full name."""
        person = self._repo.get_by_id(person_id)
        if person is None:
            return PersonNotFound(person_id=person_id)
        friends = sorted(person.friends, key=lambda p: (p.full_name, p.id))
        return [_summary(friend) for friend in friends]

    def list_people(self) -> list[PersonSummary]:
        """Return everyone in registration order."""
        return [_summary(person) for person in self._repo.list_all()]
