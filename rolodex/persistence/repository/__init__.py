"""Storage implementations."""

from .json_storage import JsonAddressBookStorage

__all__ = [
    "JsonAddressBookStorage",
]
