"""Undo and redo commands."""

from typing import ClassVar

import logfire

from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.service import PREDICATE_SHOW_ALL_PERSONS, Model

from .base import Command, CommandResult

MESSAGE_UNDO_SUCCESS = "Undo success!"
MESSAGE_UNDO_FAILURE = "No more commands to undo!"
MESSAGE_REDO_SUCCESS = "Redo success!"
MESSAGE_REDO_FAILURE = "No more commands to redo!"


class UndoCommand(Command):
    """Restores the address book to the state before the last commit."""

    COMMAND_WORD: ClassVar[str] = "undo"

    def execute(self, model: Model) -> CommandResult:
        if not model.can_undo_address_book():
            logfire.info("Nothing to undo")
            raise CommandError(CommandErrorKind.NOTHING_TO_UNDO, MESSAGE_UNDO_FAILURE)

        model.undo_address_book()
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(feedback_to_user=MESSAGE_UNDO_SUCCESS)


class RedoCommand(Command):
    """Reapplies the last undone commit."""

    COMMAND_WORD: ClassVar[str] = "redo"

    def execute(self, model: Model) -> CommandResult:
        if not model.can_redo_address_book():
            logfire.info("Nothing to redo")
            raise CommandError(CommandErrorKind.NOTHING_TO_REDO, MESSAGE_REDO_FAILURE)

        model.redo_address_book()
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(feedback_to_user=MESSAGE_REDO_SUCCESS)
