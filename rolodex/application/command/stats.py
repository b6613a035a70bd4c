"""Stats command."""

from typing import ClassVar

from rolodex.domain.service import Model

from .base import Command, CommandResult

MESSAGE_SUCCESS = "{filtered} of {total} persons displayed"


class StatsCommand(Command):
    """Reports how many persons are stored and displayed."""

    COMMAND_WORD: ClassVar[str] = "stats"

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(
            feedback_to_user=MESSAGE_SUCCESS.format(
                filtered=model.get_filtered_number_of_persons(),
                total=model.get_total_number_of_persons(),
            )
        )
