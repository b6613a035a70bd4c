"""List and filter commands.

Neither command changes data, so neither commits to history.
"""

from typing import ClassVar

from rolodex.domain.service import PREDICATE_SHOW_ALL_PERSONS, Model, PersonPredicate

from .base import Command, CommandResult
from .messages import MESSAGE_PERSONS_LISTED_OVERVIEW

MESSAGE_SUCCESS = "Listed all persons"


class ListCommand(Command):
    """Shows every person."""

    COMMAND_WORD: ClassVar[str] = "list"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(feedback_to_user=MESSAGE_SUCCESS)


class FilterCommand(Command):
    """Shows the persons matching a predicate built by the caller.

    ``description`` identifies the predicate for equality and logging, since
    two callables are only equal when they are the same object.
    """

    COMMAND_WORD: ClassVar[str] = "find"

    predicate: PersonPredicate
    description: str

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(
            feedback_to_user=MESSAGE_PERSONS_LISTED_OVERVIEW.format(
                count=model.get_filtered_number_of_persons()
            )
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCommand):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash((type(self), self.description))
