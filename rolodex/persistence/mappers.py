"""Mappers between stored documents and domain models.

Stored documents are plain pydantic models holding strings, so the on-disk
format stays independent of the domain value objects.
"""

from pydantic import BaseModel, Field

from rolodex.domain.model import AddressBook, Person, UniqueTagTypeMap
from rolodex.domain.value import DEFAULT_STATUS, Address, Email, Name, Note, Phone, Status


class StoredPerson(BaseModel):
    """Person as stored."""

    name: str
    phone: str
    email: str
    address: str
    tags: dict[str, list[str]] = Field(default_factory=dict)
    status: str = DEFAULT_STATUS
    note: str = ""


class StoredAddressBook(BaseModel):
    """Address book as stored."""

    persons: list[StoredPerson] = Field(default_factory=list)


def person_to_stored(person: Person) -> StoredPerson:
    """Convert Person domain model to its stored form.

    Args:
        person: Person domain model

    Returns:
        StoredPerson
    """
    return StoredPerson(
        name=person.name.root,
        phone=person.phone.root,
        email=person.email.root,
        address=person.address.root,
        tags=person.tags.to_dict(),
        status=person.status.root,
        note=person.note.root,
    )


def stored_to_person(stored: StoredPerson) -> Person:
    """Convert stored person to Person domain model.

    Args:
        stored: Stored person

    Returns:
        Person domain model

    Raises:
        pydantic.ValidationError: If a field is not valid
        DuplicateTagError: If a tag value is repeated under one type
    """
    return Person(
        name=Name(stored.name),
        phone=Phone(stored.phone),
        email=Email(stored.email),
        address=Address(stored.address),
        tags=UniqueTagTypeMap.from_dict(stored.tags),
        status=Status(stored.status),
        note=Note(stored.note),
    )


def address_book_to_stored(address_book: AddressBook) -> StoredAddressBook:
    return StoredAddressBook(
        persons=[person_to_stored(person) for person in address_book]
    )


def stored_to_address_book(stored: StoredAddressBook) -> AddressBook:
    """Convert stored address book to AddressBook.

    Raises:
        pydantic.ValidationError: If a field is not valid
        DomainError: If persons or tags are duplicated
    """
    return AddressBook(stored_to_person(person) for person in stored.persons)
