"""Domain model entities for rolodex."""

from rolodex.domain.model.address_book import AddressBook, UniquePersonList
from rolodex.domain.model.history import AddressBookHistory
from rolodex.domain.model.person import Person
from rolodex.domain.model.tag import Tag, UniqueTagList
from rolodex.domain.model.tag_map import UniqueTagTypeMap

__all__ = [
    "Tag",
    "UniqueTagList",
    "UniqueTagTypeMap",
    "Person",
    "UniquePersonList",
    "AddressBook",
    "AddressBookHistory",
]
