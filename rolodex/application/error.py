"""Application layer errors."""

from enum import Enum

from rolodex.domain.error import TagMapError, TagMapErrorKind


class CommandErrorKind(str, Enum):
    """Every way a command can fail."""

    INVALID_INDEX = "invalid_index"
    NO_FIELD_EDITED = "no_field_edited"
    DUPLICATE_PERSON = "duplicate_person"
    TAG_TYPE_NOT_FOUND = "tag_type_not_found"
    TAG_NOT_FOUND = "tag_not_found"
    DUPLICATE_TAG = "duplicate_tag"
    DUPLICATE_TAG_TYPE = "duplicate_tag_type"
    NOTHING_TO_UNDO = "nothing_to_undo"
    NOTHING_TO_REDO = "nothing_to_redo"


_TAG_MAP_KINDS = {
    TagMapErrorKind.DUPLICATE_TAG: CommandErrorKind.DUPLICATE_TAG,
    TagMapErrorKind.TAG_NOT_FOUND: CommandErrorKind.TAG_NOT_FOUND,
    TagMapErrorKind.TAG_TYPE_NOT_FOUND: CommandErrorKind.TAG_TYPE_NOT_FOUND,
    TagMapErrorKind.DUPLICATE_TAG_TYPE: CommandErrorKind.DUPLICATE_TAG_TYPE,
}


class CommandError(Exception):
    """Raised when a command cannot be executed.

    Nothing has been changed when this is raised. ``message`` is meant for
    the user as is.
    """

    def __init__(self, kind: CommandErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @classmethod
    def from_tag_map_error(cls, error: TagMapError) -> "CommandError":
        """Re-express a tag map error at the command boundary."""
        return cls(_TAG_MAP_KINDS[error.kind], error.message)
