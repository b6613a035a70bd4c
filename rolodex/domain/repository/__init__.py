"""Repository interfaces for rolodex.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from rolodex.domain.repository.address_book import AddressBookStorage

__all__ = [
    "AddressBookStorage",
]
