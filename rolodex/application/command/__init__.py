"""Commands runnable against the model."""

from .add_person import AddCommand
from .base import Command, CommandResult
from .clear import ClearCommand
from .delete_person import DeleteCommand
from .edit_person import EditCommand, EditPersonDescriptor, create_edited_person
from .history import RedoCommand, UndoCommand
from .list_persons import FilterCommand, ListCommand
from .stats import StatsCommand
from .tag_type import DeleteTagTypeCommand, EditTagTypeCommand

__all__ = [
    "Command",
    "CommandResult",
    "AddCommand",
    "ClearCommand",
    "DeleteCommand",
    "DeleteTagTypeCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "EditTagTypeCommand",
    "FilterCommand",
    "ListCommand",
    "RedoCommand",
    "StatsCommand",
    "UndoCommand",
    "create_edited_person",
]
