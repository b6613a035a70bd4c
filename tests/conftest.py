"""Test configuration and fixtures."""

import logfire
import pytest

from rolodex.domain.model import AddressBook, Person, UniqueTagTypeMap
from rolodex.domain.value import Address, Email, Name, Note, Phone, Status


@pytest.fixture(autouse=True, scope="session")
def quiet_logfire():
    """Keep logfire local and silent during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_person(
    name: str = "Alex Yeoh",
    phone: str = "87438807",
    email: str = "alexyeoh@example.com",
    address: str = "Blk 30 Geylang Street 29, #06-40",
    tags: dict[str, list[str]] | None = None,
    status: str | None = None,
    note: str = "",
) -> Person:
    """Helper function to build persons for tests.

    Args:
        name, phone, email, address: Identity fields
        tags: Raw tag map, e.g. ``{"Skill": ["Java"]}``
        status: Status, the default status if None
        note: Note

    Returns:
        Valid Person
    """
    fields = {
        "name": Name(name),
        "phone": Phone(phone),
        "email": Email(email),
        "address": Address(address),
        "tags": UniqueTagTypeMap.from_dict(tags or {}),
        "note": Note(note),
    }
    if status is not None:
        fields["status"] = Status(status)
    return Person(**fields)


def alice() -> Person:
    return make_person(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
        tags={"Skill": ["Java", "Python"], "Employer": ["Google"]},
    )


def benson() -> Person:
    return make_person(
        name="Benson Meier",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        tags={"Skill": ["Go"]},
        status="Interviewed",
    )


def carl() -> Person:
    return make_person(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
    )


def typical_address_book() -> AddressBook:
    """Address book with Alice, Benson and Carl, in that order."""
    return AddressBook([alice(), benson(), carl()])
