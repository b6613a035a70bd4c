"""Domain value objects for rolodex."""

from rolodex.domain.value.index import Index
from rolodex.domain.value.types import (
    DEFAULT_STATUS,
    Address,
    Email,
    Name,
    Note,
    Phone,
    Status,
    TagName,
    TagType,
)

__all__ = [
    "Index",
    # Person fields
    "Name",
    "Phone",
    "Email",
    "Address",
    "Status",
    "Note",
    "DEFAULT_STATUS",
    # Tags
    "TagType",
    "TagName",
]
