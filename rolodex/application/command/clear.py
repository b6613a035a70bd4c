"""Clear command."""

from typing import ClassVar

from rolodex.domain.model import AddressBook
from rolodex.domain.service import Model

from .base import Command, CommandResult

MESSAGE_SUCCESS = "Address book has been cleared!"


class ClearCommand(Command):
    """Removes every person from the address book."""

    COMMAND_WORD: ClassVar[str] = "clear"

    def execute(self, model: Model) -> CommandResult:
        model.set_address_book(AddressBook())
        model.commit_address_book()
        return CommandResult(feedback_to_user=MESSAGE_SUCCESS)
