"""Add person command."""

from typing import ClassVar

import logfire

from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.model import Person
from rolodex.domain.service import Model

from .base import Command, CommandResult
from .messages import MESSAGE_DUPLICATE_PERSON

MESSAGE_SUCCESS = "New person added: {person}"


class AddCommand(Command):
    """Adds a person to the address book."""

    COMMAND_WORD: ClassVar[str] = "add"

    person: Person

    def execute(self, model: Model) -> CommandResult:
        with logfire.span("add_command.execute", name=str(self.person.name)):
            if model.has_person(self.person):
                raise CommandError(
                    CommandErrorKind.DUPLICATE_PERSON, MESSAGE_DUPLICATE_PERSON
                )

            model.add_person(self.person)
            model.commit_address_book()
            logfire.info("Person added", name=str(self.person.name))
            return CommandResult(
                feedback_to_user=MESSAGE_SUCCESS.format(person=self.person)
            )
