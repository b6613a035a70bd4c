"""In-memory implementation of address book storage for testing."""

from pathlib import Path
from typing import Optional

from rolodex.domain.model import AddressBook
from rolodex.domain.repository import AddressBookStorage
from rolodex.persistence.error import StorageError


class InMemoryAddressBookStorage(AddressBookStorage):
    """In-memory implementation of AddressBookStorage for testing."""

    def __init__(
        self, address_book: AddressBook | None = None, fail_on_save: bool = False
    ) -> None:
        """Initialize storage.

        Args:
            address_book: Data returned by ``load``, None for nothing stored
            fail_on_save: Make every ``save`` raise StorageError
        """
        self._address_book = address_book.copy() if address_book is not None else None
        self.fail_on_save = fail_on_save
        self.save_count = 0

    @property
    def file_path(self) -> Path:
        return Path("memory://addressbook")

    def load(self) -> Optional[AddressBook]:
        """Return a copy of the stored address book."""
        return self._address_book.copy() if self._address_book is not None else None

    def save(self, address_book: AddressBook) -> None:
        """Keep a copy of the address book."""
        if self.fail_on_save:
            raise StorageError("Simulated write failure")
        self._address_book = address_book.copy()
        self.save_count += 1
