"""Address book aggregate: the ordered, identity-unique list of persons."""

from collections.abc import Iterable, Iterator

from rolodex.domain.error import (
    DuplicatePersonError,
    PersonNotFoundError,
)
from rolodex.domain.model.person import Person
from rolodex.domain.value import TagType


class UniquePersonList:
    """Ordered persons where no two share identity fields.

    Lookups for replacement and removal go by full equality, duplicate
    checks go by ``Person.is_same_person``.
    """

    def __init__(self) -> None:
        self._persons: list[Person] = []

    def contains(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError(str(person.name))
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` in the same position.

        Raises:
            PersonNotFoundError: If ``target`` is not in the list
            DuplicatePersonError: If ``edited`` collides with another person
        """
        try:
            position = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError(str(target.name)) from None

        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(str(edited.name))

        self._persons[position] = edited

    def remove(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError(str(person.name)) from None

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole content.

        Raises:
            DuplicatePersonError: If ``persons`` are not identity-unique
        """
        replacement: list[Person] = []
        for person in persons:
            if any(existing.is_same_person(person) for existing in replacement):
                raise DuplicatePersonError(str(person.name))
            replacement.append(person)
        self._persons = replacement

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __getitem__(self, position: int) -> Person:
        return self._persons[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._persons == other._persons


class AddressBook:
    """Whole dataset of the application.

    Persons are immutable, so copying the book only copies the list.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons = UniquePersonList()
        self._persons.set_persons(persons)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def set_persons(self, persons: Iterable[Person]) -> None:
        self._persons.set_persons(persons)

    def reset_data(self, new_data: "AddressBook") -> None:
        """Replace the content with the persons of ``new_data``."""
        self.set_persons(new_data.persons)

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity exists."""
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_person(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def has_tag_type(self, tag_type: TagType) -> bool:
        """Return True if any person files tags under ``tag_type``."""
        return any(person.tags.contains_tag_type(tag_type) for person in self._persons)

    def delete_tag_type_for_all_persons(self, tag_type: TagType) -> int:
        """Drop ``tag_type`` from every person that has it.

        Returns:
            Number of persons changed
        """
        changed = 0
        updated: list[Person] = []
        for person in self._persons:
            if person.tags.contains_tag_type(tag_type):
                tags = person.tags.copy()
                tags.remove_tag_type(tag_type)
                updated.append(person.with_tags(tags))
                changed += 1
            else:
                updated.append(person)
        self._persons.set_persons(updated)
        return changed

    def edit_tag_type_for_all_persons(self, old: TagType, new: TagType) -> int:
        """Rename ``old`` to ``new`` for every person that has it.

        All persons are checked before any of them is replaced.

        Returns:
            Number of persons changed

        Raises:
            DuplicateTagTypeError: If a person already files tags under ``new``
        """
        changed = 0
        updated: list[Person] = []
        for person in self._persons:
            if person.tags.contains_tag_type(old):
                tags = person.tags.copy()
                tags.rename_tag_type(old, new)
                updated.append(person.with_tags(tags))
                changed += 1
            else:
                updated.append(person)
        self._persons.set_persons(updated)
        return changed

    def copy(self) -> "AddressBook":
        return AddressBook(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons)"
