"""Commands maintaining tag types across every person."""

from typing import ClassVar

import logfire

from rolodex.application.error import CommandError
from rolodex.domain.error import TagMapError, TagTypeNotFoundError
from rolodex.domain.service import Model
from rolodex.domain.value import TagType

from .base import Command, CommandResult

MESSAGE_DELETE_TAG_TYPE_SUCCESS = "Deleted tag type: {tag_type}"
MESSAGE_EDIT_TAG_TYPE_SUCCESS = "Renamed tag type {old} to {new}"
MESSAGE_EDIT_TAG_TYPE_UNCHANGED = "Tag type {tag_type} is unchanged"


class DeleteTagTypeCommand(Command):
    """Removes a tag type, with all its values, from every person."""

    COMMAND_WORD: ClassVar[str] = "deltagtype"

    tag_type: TagType

    def execute(self, model: Model) -> CommandResult:
        with logfire.span("delete_tag_type_command.execute", tag_type=str(self.tag_type)):
            if not model.has_tag_type(self.tag_type):
                error = TagTypeNotFoundError(str(self.tag_type))
                raise CommandError.from_tag_map_error(error)

            model.delete_tag_type_for_all_person(self.tag_type)
            model.commit_address_book()
            return CommandResult(
                feedback_to_user=MESSAGE_DELETE_TAG_TYPE_SUCCESS.format(
                    tag_type=self.tag_type
                )
            )


class EditTagTypeCommand(Command):
    """Renames a tag type for every person that has it."""

    COMMAND_WORD: ClassVar[str] = "edittagtype"

    to_edit: TagType
    edit_to: TagType

    def execute(self, model: Model) -> CommandResult:
        with logfire.span(
            "edit_tag_type_command.execute",
            tag_type=str(self.to_edit),
            new_tag_type=str(self.edit_to),
        ):
            if not model.has_tag_type(self.to_edit):
                error = TagTypeNotFoundError(str(self.to_edit))
                raise CommandError.from_tag_map_error(error)

            # Same name: nothing to rename and no history entry
            if self.to_edit == self.edit_to:
                return CommandResult(
                    feedback_to_user=MESSAGE_EDIT_TAG_TYPE_UNCHANGED.format(
                        tag_type=self.to_edit
                    )
                )

            try:
                model.edit_tag_type_for_all_person(self.to_edit, self.edit_to)
            except TagMapError as e:
                raise CommandError.from_tag_map_error(e) from e

            model.commit_address_book()
            return CommandResult(
                feedback_to_user=MESSAGE_EDIT_TAG_TYPE_SUCCESS.format(
                    old=self.to_edit, new=self.edit_to
                )
            )
