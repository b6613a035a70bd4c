"""In-memory model: the address book, its history and the display filter."""

import logfire

from rolodex.domain.model import AddressBook, AddressBookHistory, Person
from rolodex.domain.value import TagType

from .base import Service
from .model import PREDICATE_SHOW_ALL_PERSONS, Model, PersonPredicate


class ModelManager(Model, Service):
    """Owns the working address book and its undo/redo history.

    Mutators change the working book only. ``commit_address_book`` records
    the working book as a new history entry, so a command that fails before
    committing leaves history untouched.
    """

    def __init__(
        self, address_book: AddressBook | None = None, max_history_depth: int | None = None
    ) -> None:
        """Initialize model manager.

        Args:
            address_book: Data loaded at startup, empty if None
            max_history_depth: Maximum number of undo snapshots, None for unbounded
        """
        self._address_book = (address_book or AddressBook()).copy()
        self._history = AddressBookHistory(
            self._address_book, max_depth=max_history_depth
        )
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        logfire.info(
            "Model initialized",
            persons=len(self._address_book),
            max_history_depth=max_history_depth,
        )

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def get_address_book(self) -> AddressBook:
        return self._address_book.copy()

    def commit_address_book(self) -> None:
        self._history.commit(self._address_book)
        logfire.debug(
            "Address book committed",
            persons=len(self._address_book),
            undo_depth=self._history.undo_depth(),
        )

    def undo_address_book(self) -> None:
        with logfire.span("model_manager.undo_address_book"):
            self._address_book.reset_data(self._history.undo())
            logfire.info(
                "Address book restored to previous state",
                undo_depth=self._history.undo_depth(),
                redo_depth=self._history.redo_depth(),
            )

    def redo_address_book(self) -> None:
        with logfire.span("model_manager.redo_address_book"):
            self._address_book.reset_data(self._history.redo())
            logfire.info(
                "Address book restored to undone state",
                undo_depth=self._history.undo_depth(),
                redo_depth=self._history.redo_depth(),
            )

    def can_undo_address_book(self) -> bool:
        return self._history.can_undo()

    def can_redo_address_book(self) -> bool:
        return self._history.can_redo()

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def delete_person(self, target: Person) -> None:
        with logfire.span("model_manager.delete_person", name=str(target.name)):
            self._address_book.remove_person(target)

    def add_person(self, person: Person) -> None:
        with logfire.span("model_manager.add_person", name=str(person.name)):
            self._address_book.add_person(person)
            self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited_person: Person) -> None:
        with logfire.span(
            "model_manager.set_person",
            name=str(target.name),
            edited_name=str(edited_person.name),
        ):
            self._address_book.set_person(target, edited_person)

    def get_filtered_person_list(self) -> list[Person]:
        return [person for person in self._address_book if self._predicate(person)]

    def get_total_number_of_persons(self) -> int:
        return len(self._address_book)

    def get_filtered_number_of_persons(self) -> int:
        return len(self.get_filtered_person_list())

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def has_tag_type(self, tag_type: TagType) -> bool:
        return self._address_book.has_tag_type(tag_type)

    def delete_tag_type_for_all_person(self, tag_type: TagType) -> None:
        with logfire.span(
            "model_manager.delete_tag_type_for_all_person", tag_type=str(tag_type)
        ):
            changed = self._address_book.delete_tag_type_for_all_persons(tag_type)
            logfire.info("Tag type deleted", tag_type=str(tag_type), persons=changed)

    def edit_tag_type_for_all_person(self, to_edit: TagType, edit_to: TagType) -> None:
        with logfire.span(
            "model_manager.edit_tag_type_for_all_person",
            tag_type=str(to_edit),
            new_tag_type=str(edit_to),
        ):
            changed = self._address_book.edit_tag_type_for_all_persons(to_edit, edit_to)
            logfire.info(
                "Tag type renamed",
                tag_type=str(to_edit),
                new_tag_type=str(edit_to),
                persons=changed,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
        )
