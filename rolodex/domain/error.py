"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class TagMapErrorKind(str, Enum):
    """Structural violations of a person's tag collection."""

    DUPLICATE_TAG = "duplicate_tag"
    TAG_NOT_FOUND = "tag_not_found"
    TAG_TYPE_NOT_FOUND = "tag_type_not_found"
    DUPLICATE_TAG_TYPE = "duplicate_tag_type"


class TagMapError(DomainError):
    """Raised when a tag operation would break tag map invariants.

    ``kind`` tells callers which invariant was at stake without having to
    switch on the concrete subclass.
    """

    kind: TagMapErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateTagError(TagMapError):
    """Raised when an operation would put the same value twice under a type."""

    kind = TagMapErrorKind.DUPLICATE_TAG

    def __init__(self, tag_type: str, tag_name: str):
        self.tag_type = tag_type
        self.tag_name = tag_name
        super().__init__(f"Tag {tag_name} already exists under tag type {tag_type}")


class TagNotFoundError(TagMapError):
    """Raised when removing a value that is not under the given type."""

    kind = TagMapErrorKind.TAG_NOT_FOUND

    def __init__(self, tag_type: str, tag_name: str):
        self.tag_type = tag_type
        self.tag_name = tag_name
        super().__init__(f"Tag {tag_name} not found under tag type {tag_type}")


class TagTypeNotFoundError(TagMapError):
    """Raised when a tag type is referenced but not present."""

    kind = TagMapErrorKind.TAG_TYPE_NOT_FOUND

    def __init__(self, tag_type: str):
        self.tag_type = tag_type
        super().__init__(f"Tag type {tag_type} not found")


class DuplicateTagTypeError(TagMapError):
    """Raised when an operation would result in duplicate tag types."""

    kind = TagMapErrorKind.DUPLICATE_TAG_TYPE

    def __init__(self, tag_type: str):
        self.tag_type = tag_type
        super().__init__(f"Operation would result in duplicate tag type {tag_type}")


class DuplicatePersonError(DomainError):
    """Raised when an operation would result in two persons with one identity."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Operation would result in duplicate persons: {name}")


class PersonNotFoundError(DomainError):
    """Raised when a person is expected in the address book but missing."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Person not found: {name}")


class HistoryError(DomainError):
    """Raised when undoing or redoing with nothing to restore."""

    pass
