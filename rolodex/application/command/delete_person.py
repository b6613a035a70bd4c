"""Delete person command."""

from typing import ClassVar

import logfire

from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.service import Model
from rolodex.domain.value import Index

from .base import Command, CommandResult
from .messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX

MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {person}"


class DeleteCommand(Command):
    """Deletes the person at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "delete"

    index: Index

    def execute(self, model: Model) -> CommandResult:
        with logfire.span("delete_command.execute", index=self.index.one_based):
            last_shown_list = model.get_filtered_person_list()
            if self.index.zero_based >= len(last_shown_list):
                raise CommandError(
                    CommandErrorKind.INVALID_INDEX,
                    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
                )

            person_to_delete = last_shown_list[self.index.zero_based]
            model.delete_person(person_to_delete)
            model.commit_address_book()
            logfire.info("Person deleted", name=str(person_to_delete.name))
            return CommandResult(
                feedback_to_user=MESSAGE_DELETE_PERSON_SUCCESS.format(
                    person=person_to_delete
                )
            )
