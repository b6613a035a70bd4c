"""JSON file implementation of address book storage."""

from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional

import logfire
from pydantic import ValidationError

from rolodex.domain.error import DomainError
from rolodex.domain.model import AddressBook
from rolodex.domain.repository import AddressBookStorage
from rolodex.persistence.error import DataLoadingError, StorageError
from rolodex.persistence.mappers import (
    StoredAddressBook,
    address_book_to_stored,
    stored_to_address_book,
)


class JsonAddressBookStorage(AddressBookStorage):
    """Stores the address book as one JSON document."""

    def __init__(self, file_path: Path) -> None:
        """Initialize storage.

        Args:
            file_path: JSON file to read and write
        """
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> Optional[AddressBook]:
        """Load the address book from the JSON file."""
        with logfire.span("json_storage.load", path=str(self._file_path)):
            if not self._file_path.exists():
                logfire.info("Data file not found", path=str(self._file_path))
                return None

            try:
                raw = self._file_path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                logfire.warn(
                    "Data file is not UTF-8 text",
                    path=str(self._file_path),
                    error=str(e),
                )
                raise DataLoadingError(
                    f"Data file {self._file_path} is not UTF-8 text: {e}"
                ) from e
            except OSError as e:
                raise StorageError(f"Cannot read {self._file_path}: {e}") from e

            try:
                stored = StoredAddressBook.model_validate_json(raw)
                address_book = stored_to_address_book(stored)
            except (ValidationError, DomainError) as e:
                logfire.warn(
                    "Data file not in the correct format",
                    path=str(self._file_path),
                    error=str(e),
                )
                raise DataLoadingError(
                    f"Data file {self._file_path} not in the correct format: {e}"
                ) from e

            logfire.info(
                "Address book loaded",
                path=str(self._file_path),
                persons=len(address_book),
            )
            return address_book

    def save(self, address_book: AddressBook) -> None:
        """Write the address book to the JSON file, creating parent folders.

        The document is written to a temporary file in the same folder and
        then moved over the data file, so the data file is never left half
        written.
        """
        with logfire.span(
            "json_storage.save", path=str(self._file_path), persons=len(address_book)
        ):
            document = address_book_to_stored(address_book).model_dump_json(indent=2)
            temp_path: Path | None = None
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                with NamedTemporaryFile(
                    "w",
                    encoding="utf-8",
                    dir=self._file_path.parent,
                    prefix=f".{self._file_path.name}.",
                    suffix=".tmp",
                    delete=False,
                ) as temp_file:
                    temp_path = Path(temp_file.name)
                    temp_file.write(document)
                temp_path.replace(self._file_path)
            except OSError as e:
                if temp_path is not None:
                    temp_path.unlink(missing_ok=True)
                raise StorageError(f"Cannot write {self._file_path}: {e}") from e
