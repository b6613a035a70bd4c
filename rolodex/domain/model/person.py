"""Person aggregate.

A person is identified by name, phone, email and address. Tags, status and
note describe the relationship but do not take part in duplicate detection.
"""

from typing import Any

from pydantic import Field, field_validator

from rolodex.domain.model.common import DomainModel
from rolodex.domain.model.tag_map import UniqueTagTypeMap
from rolodex.domain.value import (
    DEFAULT_STATUS,
    Address,
    Email,
    Name,
    Note,
    Phone,
    Status,
)


class Person(DomainModel):
    """Immutable person record.

    Every edit produces a new Person. The tag map is copied and frozen on
    the way in; take ``tags.copy()`` to build a changed map.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: UniqueTagTypeMap = Field(default_factory=lambda: UniqueTagTypeMap().freeze())
    status: Status = Field(default_factory=lambda: Status(DEFAULT_STATUS))
    note: Note = Field(default_factory=lambda: Note(""))

    @field_validator("tags", mode="before")
    @classmethod
    def copy_tags(cls, v: Any) -> Any:
        """Take a frozen private copy of the tag map, or build one from a plain dict."""
        if isinstance(v, UniqueTagTypeMap):
            return v.copy().freeze()
        if isinstance(v, dict):
            return UniqueTagTypeMap.from_dict(v).freeze()
        return v

    @property
    def identity(self) -> tuple[Name, Phone, Email, Address]:
        """Fields used for duplicate detection."""
        return (self.name, self.phone, self.email, self.address)

    def is_same_person(self, other: "Person | None") -> bool:
        """Return True if ``other`` has the same identity fields."""
        if other is None:
            return False
        return other is self or other.identity == self.identity

    def with_tags(self, tags: UniqueTagTypeMap) -> "Person":
        """Return a copy of this person holding ``tags`` instead."""
        return Person(
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            tags=tags,
            status=self.status,
            note=self.note,
        )

    def __str__(self) -> str:
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Tags: [{self.tags}]; "
            f"Status: {self.status}; Note: {self.note}"
        )
