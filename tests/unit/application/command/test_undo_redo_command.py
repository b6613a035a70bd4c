"""Unit tests for undo and redo commands."""

import pytest

from rolodex.application.command import (
    AddCommand,
    DeleteCommand,
    ListCommand,
    RedoCommand,
    UndoCommand,
)
from rolodex.application.error import CommandError, CommandErrorKind
from rolodex.domain.service import ModelManager
from rolodex.domain.value import Index
from tests.conftest import alice, carl, typical_address_book


class TestUndoCommand:
    def test_nothing_to_undo(self):
        with pytest.raises(CommandError) as exc_info:
            UndoCommand().execute(ModelManager())

        assert exc_info.value.kind == CommandErrorKind.NOTHING_TO_UNDO
        assert exc_info.value.message == "No more commands to undo!"

    def test_undo_restores_previous_book(self):
        model = ModelManager(typical_address_book())
        DeleteCommand(index=Index(1)).execute(model)

        result = UndoCommand().execute(model)

        assert result.feedback_to_user == "Undo success!"
        assert model.get_address_book() == typical_address_book()

    def test_undo_steps_back_one_command_at_a_time(self):
        model = ModelManager()
        AddCommand(person=alice()).execute(model)
        AddCommand(person=carl()).execute(model)

        UndoCommand().execute(model)
        assert model.get_filtered_person_list() == [alice()]

        UndoCommand().execute(model)
        assert model.get_total_number_of_persons() == 0

        with pytest.raises(CommandError):
            UndoCommand().execute(model)

    def test_undo_resets_filter(self):
        model = ModelManager(typical_address_book())
        DeleteCommand(index=Index(1)).execute(model)
        model.update_filtered_person_list(lambda p: False)

        UndoCommand().execute(model)

        assert model.get_filtered_number_of_persons() == 3


class TestRedoCommand:
    def test_nothing_to_redo(self):
        with pytest.raises(CommandError) as exc_info:
            RedoCommand().execute(ModelManager())

        assert exc_info.value.kind == CommandErrorKind.NOTHING_TO_REDO
        assert exc_info.value.message == "No more commands to redo!"

    def test_redo_after_undo(self):
        model = ModelManager(typical_address_book())
        DeleteCommand(index=Index(1)).execute(model)
        after_delete = model.get_address_book()
        UndoCommand().execute(model)

        result = RedoCommand().execute(model)

        assert result.feedback_to_user == "Redo success!"
        assert model.get_address_book() == after_delete

    def test_new_command_clears_redo(self):
        model = ModelManager()
        AddCommand(person=alice()).execute(model)
        UndoCommand().execute(model)

        AddCommand(person=carl()).execute(model)

        with pytest.raises(CommandError) as exc_info:
            RedoCommand().execute(model)
        assert exc_info.value.kind == CommandErrorKind.NOTHING_TO_REDO

    def test_view_command_keeps_redo(self):
        model = ModelManager()
        AddCommand(person=alice()).execute(model)
        UndoCommand().execute(model)

        ListCommand().execute(model)
        RedoCommand().execute(model)

        assert model.has_person(alice())
