"""In-memory storage implementations for testing."""

from .address_book import InMemoryAddressBookStorage

__all__ = [
    "InMemoryAddressBookStorage",
]
