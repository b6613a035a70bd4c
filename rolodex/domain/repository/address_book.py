"""Address book storage interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from rolodex.domain.model import AddressBook


class AddressBookStorage(ABC):
    """Storage interface for the address book.

    The model never talks to storage directly; the logic layer loads at
    startup and saves after each successful command.
    """

    @property
    @abstractmethod
    def file_path(self) -> Path:
        """Location the address book is stored at."""
        pass

    @abstractmethod
    def load(self) -> Optional[AddressBook]:
        """Load the stored address book.

        Returns:
            The address book, or None if nothing has been stored yet

        Raises:
            StorageError: If stored data cannot be read or is malformed
        """
        pass

    @abstractmethod
    def save(self, address_book: AddressBook) -> None:
        """Store the address book, replacing what was there.

        Args:
            address_book: Address book to store

        Raises:
            StorageError: If the data cannot be written
        """
        pass
