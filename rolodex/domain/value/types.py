"""Person and tag value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate the validation rules for every field of a person record.
"""

import re

from pydantic import field_validator

from rolodex.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9]+([+_.-][A-Za-z0-9]+)*"
    r"@([A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?\.)*"
    r"[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9]){1,}$"
)

DEFAULT_STATUS = "Application Received"


def _is_alphanumeric_words(value: str) -> bool:
    """True when value is alphanumeric words separated by single spaces."""
    words = value.split(" ")
    return all(word and word.isalnum() for word in words)


class Name(RootValueObject[str]):
    """Full name of a person.

    Alphanumeric characters and spaces, must not be blank.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name format."""
        if not v or not v[0].isalnum() or not all(c.isalnum() or c == " " for c in v):
            raise ValueError(
                "Names should only contain alphanumeric characters and spaces, "
                "and it should not be blank"
            )
        return v


class Phone(RootValueObject[str]):
    """Phone number, digits only, at least 3 long."""

    @field_validator("root")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Validate phone format."""
        if not re.fullmatch(r"\d{3,}", v):
            raise ValueError(
                "Phone numbers should only contain numbers, "
                "and it should be at least 3 digits long"
            )
        return v


class Email(RootValueObject[str]):
    """Email address in local-part@domain form."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Emails should be of the format local-part@domain")
        return v


class Address(RootValueObject[str]):
    """Postal address. Any value, must not be blank."""

    @field_validator("root")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate address is not blank."""
        if not v or v[0].isspace():
            raise ValueError("Addresses can take any values, and it should not be blank")
        return v


class Status(RootValueObject[str]):
    """Where a person currently stands in the relationship pipeline.

    Examples: 'Application Received', 'Interviewed', 'Offered'
    """

    @field_validator("root")
    @classmethod
    def validate_status(cls, v: str) -> str:
        """Validate status format."""
        if not _is_alphanumeric_words(v) or len(v) > 50:
            raise ValueError(
                "Status should be 1-50 characters of alphanumeric words "
                "separated by single spaces"
            )
        return v


class Note(RootValueObject[str]):
    """Free-form note. May be empty."""

    @field_validator("root")
    @classmethod
    def validate_note(cls, v: str) -> str:
        """Validate note length."""
        if len(v) > 1000:
            raise ValueError("Note must be at most 1000 characters")
        return v


class TagType(RootValueObject[str]):
    """Named category grouping tag values.

    Alphanumeric words separated by single spaces, 1-30 characters.
    Examples: 'Skill', 'Past Employer'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_type(cls, v: str) -> str:
        """Validate tag type format."""
        if not _is_alphanumeric_words(v) or len(v) > 30:
            raise ValueError(
                "Tag types should be 1-30 characters of alphanumeric words "
                "separated by single spaces"
            )
        return v


class TagName(RootValueObject[str]):
    """One tag value, alphanumeric without spaces.

    Examples: 'Java', 'Go', 'Google'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not v or not v.isalnum():
            raise ValueError("Tag names should be alphanumeric")
        return v
