"""Command execution entry point for user interfaces."""

from pathlib import Path
from typing import Union

import logfire
from pydantic import BaseModel

from rolodex.application.command import Command
from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.model import Person
from rolodex.domain.repository import AddressBookStorage
from rolodex.domain.service import Model
from rolodex.persistence.error import StorageError

MESSAGE_STORAGE_WARNING = "Could not save data to file {path}: {error}"


class CommandSuccess(BaseModel):
    """Command ran and its changes are in the model."""

    feedback_to_user: str
    storage_warning: str | None = None  # Set when saving to storage failed


class CommandFailure(BaseModel):
    """Command was rejected; model and history are unchanged."""

    kind: CommandErrorKind
    message: str


CommandOutcome = Union[CommandSuccess, CommandFailure]


class LogicManager:
    """Runs commands against the model and keeps storage in sync.

    Commands are executed one at a time. After each successful command the
    address book is saved; a save failure is reported on the outcome and never
    touches the in-memory state.
    """

    def __init__(self, model: Model, storage: AddressBookStorage) -> None:
        """Initialize logic manager.

        Args:
            model: Model commands run against
            storage: Storage the address book is saved to
        """
        self.model = model
        self.storage = storage

    def execute(self, command: Command) -> CommandOutcome:
        """Execute a command.

        Args:
            command: Command built by the caller

        Returns:
            CommandSuccess with user feedback, or CommandFailure
        """
        with logfire.span("logic.execute", command=type(command).__name__):
            try:
                result = command.execute(self.model)
            except CommandError as e:
                logfire.info(
                    "Command rejected",
                    command=type(command).__name__,
                    kind=e.kind.value,
                    message=e.message,
                )
                return CommandFailure(kind=e.kind, message=e.message)

            return CommandSuccess(
                feedback_to_user=result.feedback_to_user,
                storage_warning=self.flush(),
            )

    def flush(self) -> str | None:
        """Save the current address book.

        Returns:
            A warning for the user if saving failed, otherwise None
        """
        try:
            self.storage.save(self.model.get_address_book())
        except StorageError as e:
            logfire.warn(
                "Address book not saved",
                path=str(self.storage.file_path),
                error=str(e),
            )
            return MESSAGE_STORAGE_WARNING.format(path=self.storage.file_path, error=e)
        return None

    def get_filtered_person_list(self) -> list[Person]:
        return self.model.get_filtered_person_list()

    def get_address_book_file_path(self) -> Path:
        return self.storage.file_path
