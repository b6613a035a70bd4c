"""Base command."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from rolodex.domain.service import Model


class CommandResult(BaseModel):
    """Outcome of a successful command."""

    model_config = ConfigDict(frozen=True)

    feedback_to_user: str


class Command(BaseModel, ABC):
    """A user instruction, ready to run against the model.

    Commands are immutable and compared by value. ``execute`` either
    succeeds with exactly one history commit (for commands that change
    data) or raises ``CommandError`` without changing anything.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """Run the command.

        Args:
            model: Model to read and change

        Returns:
            Feedback for the user

        Raises:
            CommandError: If the command cannot be executed
        """
        pass
