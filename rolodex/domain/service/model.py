"""Model interface.

Commands only ever see this interface, which keeps them testable against
any implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from rolodex.domain.model import AddressBook, Person
from rolodex.domain.value import TagType

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    """Predicate that lets every person through."""
    return True


PREDICATE_SHOW_ALL_PERSONS: PersonPredicate = show_all_persons


class Model(ABC):
    """API of the model component."""

    @abstractmethod
    def set_address_book(self, address_book: AddressBook) -> None:
        """Replace the address book data with ``address_book``."""
        pass

    @abstractmethod
    def get_address_book(self) -> AddressBook:
        """Return a copy of the current address book."""
        pass

    # History
    @abstractmethod
    def commit_address_book(self) -> None:
        """Save the current address book state for undo/redo."""
        pass

    @abstractmethod
    def undo_address_book(self) -> None:
        """Restore the previous address book state.

        Raises:
            HistoryError: If there is no previous state
        """
        pass

    @abstractmethod
    def redo_address_book(self) -> None:
        """Restore the previously undone address book state.

        Raises:
            HistoryError: If there is no undone state
        """
        pass

    @abstractmethod
    def can_undo_address_book(self) -> bool:
        pass

    @abstractmethod
    def can_redo_address_book(self) -> bool:
        pass

    # Persons
    @abstractmethod
    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity exists."""
        pass

    @abstractmethod
    def delete_person(self, target: Person) -> None:
        """Delete ``target``, which must exist."""
        pass

    @abstractmethod
    def add_person(self, person: Person) -> None:
        """Add ``person``, which must not exist yet."""
        pass

    @abstractmethod
    def set_person(self, target: Person, edited_person: Person) -> None:
        """Replace ``target`` with ``edited_person``.

        ``target`` must exist and ``edited_person`` must not share its
        identity with another existing person.
        """
        pass

    # Filtered view
    @abstractmethod
    def get_filtered_person_list(self) -> list[Person]:
        """Return the persons currently displayed."""
        pass

    @abstractmethod
    def get_total_number_of_persons(self) -> int:
        pass

    @abstractmethod
    def get_filtered_number_of_persons(self) -> int:
        pass

    @abstractmethod
    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Filter the displayed persons by ``predicate``."""
        pass

    # Tag types
    @abstractmethod
    def has_tag_type(self, tag_type: TagType) -> bool:
        """Return True if any person files tags under ``tag_type``."""
        pass

    @abstractmethod
    def delete_tag_type_for_all_person(self, tag_type: TagType) -> None:
        pass

    @abstractmethod
    def edit_tag_type_for_all_person(self, to_edit: TagType, edit_to: TagType) -> None:
        pass
