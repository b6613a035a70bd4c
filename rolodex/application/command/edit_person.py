"""Edit person command."""

from typing import Any, ClassVar, Optional

import logfire
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.error import TagMapError
from rolodex.domain.model import Person, UniqueTagTypeMap
from rolodex.domain.service import PREDICATE_SHOW_ALL_PERSONS, Model
from rolodex.domain.value import Address, Email, Index, Name, Note, Phone, Status

from .base import Command, CommandResult
from .messages import MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX

MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {person}"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

_SCALAR_FIELDS = ("name", "phone", "email", "address", "status", "note")


class EditPersonDescriptor(BaseModel):
    """Sparse patch describing how to edit a person.

    A scalar field is set when it was passed to the constructor, in which
    case it replaces the person's value; fields left out keep the person's
    value. Passing None explicitly is rejected so that "unset" has exactly
    one spelling.

    Tags are patched with two maps: ``old_tag_type_map`` lists values to
    remove and ``new_tag_type_map`` values to add. Removal runs first, so one
    descriptor can move a value from one tag type to another.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    status: Optional[Status] = None
    note: Optional[Note] = None
    old_tag_type_map: UniqueTagTypeMap = Field(
        default_factory=lambda: UniqueTagTypeMap().freeze()
    )
    new_tag_type_map: UniqueTagTypeMap = Field(
        default_factory=lambda: UniqueTagTypeMap().freeze()
    )

    @field_validator("old_tag_type_map", "new_tag_type_map", mode="before")
    @classmethod
    def copy_tag_maps(cls, v: Any) -> Any:
        """Take a frozen private copy of a tag map, or build one from a plain dict."""
        if isinstance(v, UniqueTagTypeMap):
            return v.copy().freeze()
        if isinstance(v, dict):
            return UniqueTagTypeMap.from_dict(v).freeze()
        return v

    @model_validator(mode="after")
    def reject_explicit_none(self) -> "EditPersonDescriptor":
        """Reject fields that were passed as None."""
        for field in _SCALAR_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} must be left out instead of set to None")
        return self

    def is_set(self, field: str) -> bool:
        """Return True if ``field`` is part of the patch."""
        return field in _SCALAR_FIELDS and field in self.model_fields_set

    def value_or(self, field: str, fallback: Any) -> Any:
        """Return the patched value of ``field``, or ``fallback`` when unset."""
        return getattr(self, field) if self.is_set(field) else fallback

    def is_any_field_edited(self) -> bool:
        """Return True if at least one field is edited."""
        if not self.old_tag_type_map.is_empty() or not self.new_tag_type_map.is_empty():
            return True
        return any(self.is_set(field) for field in _SCALAR_FIELDS)


def create_edited_person(
    person_to_edit: Person, descriptor: EditPersonDescriptor
) -> Person:
    """Build the person that results from applying ``descriptor``.

    Tags are computed as the original tags minus ``old_tag_type_map``, then
    merged with ``new_tag_type_map``.

    Raises:
        TagTypeNotFoundError: If a type to remove is not on the person
        TagNotFoundError: If a value to remove is not on the person
        DuplicateTagError: If a value to add is still on the person after removal
    """
    updated_tags = person_to_edit.tags.copy()
    updated_tags.remove_tags(descriptor.old_tag_type_map)
    updated_tags.merge_tag_type_map(descriptor.new_tag_type_map)

    return Person(
        name=descriptor.value_or("name", person_to_edit.name),
        phone=descriptor.value_or("phone", person_to_edit.phone),
        email=descriptor.value_or("email", person_to_edit.email),
        address=descriptor.value_or("address", person_to_edit.address),
        tags=updated_tags,
        status=descriptor.value_or("status", person_to_edit.status),
        note=descriptor.value_or("note", person_to_edit.note),
    )


class EditCommand(Command):
    """Edits the details of the person at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "edit"

    index: Index
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        """Execute edit flow.

        Raises:
            CommandError: If nothing is edited, the index is out of range, the
                edit collides with another person or breaks tag invariants
        """
        with logfire.span("edit_command.execute", index=self.index.one_based):
            # 1. Reject empty patches before looking at the model
            if not self.descriptor.is_any_field_edited():
                raise CommandError(CommandErrorKind.NO_FIELD_EDITED, MESSAGE_NOT_EDITED)

            # 2. Resolve index against what is displayed
            last_shown_list = model.get_filtered_person_list()
            if self.index.zero_based >= len(last_shown_list):
                logfire.warn(
                    "Edit index out of range",
                    index=self.index.one_based,
                    displayed=len(last_shown_list),
                )
                raise CommandError(
                    CommandErrorKind.INVALID_INDEX,
                    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
                )
            person_to_edit = last_shown_list[self.index.zero_based]

            # 3. Compute the edited person
            try:
                edited_person = create_edited_person(person_to_edit, self.descriptor)
            except TagMapError as e:
                logfire.warn("Tag edit rejected", error=e.message, kind=e.kind.value)
                raise CommandError.from_tag_map_error(e) from e

            # 4. Identity must stay unique
            if not person_to_edit.is_same_person(edited_person) and model.has_person(
                edited_person
            ):
                raise CommandError(
                    CommandErrorKind.DUPLICATE_PERSON, MESSAGE_DUPLICATE_PERSON
                )

            # 5. Apply and commit
            model.set_person(person_to_edit, edited_person)
            model.commit_address_book()
            model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

            logfire.info("Person edited", name=str(edited_person.name))
            return CommandResult(
                feedback_to_user=MESSAGE_EDIT_PERSON_SUCCESS.format(person=edited_person)
            )
