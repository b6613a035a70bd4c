"""Unit tests for ModelManager."""

import pytest

from rolodex.domain.error import DuplicatePersonError, HistoryError
from rolodex.domain.model import AddressBook
from rolodex.domain.service import PREDICATE_SHOW_ALL_PERSONS, ModelManager
from rolodex.domain.value import Note, TagType
from tests.conftest import alice, benson, carl, typical_address_book


class TestConstruction:
    """Tests for initial state."""

    def test_empty_by_default(self):
        model = ModelManager()

        assert model.get_total_number_of_persons() == 0
        assert not model.can_undo_address_book()
        assert not model.can_redo_address_book()

    def test_loaded_book_is_copied(self):
        book = typical_address_book()
        model = ModelManager(book)

        book.remove_person(alice())

        assert model.get_total_number_of_persons() == 3

    def test_get_address_book_returns_copy(self):
        model = ModelManager(typical_address_book())

        model.get_address_book().remove_person(alice())

        assert model.has_person(alice())


class TestPersons:
    """Tests for person operations."""

    def test_add_person(self):
        model = ModelManager()

        model.add_person(alice())

        assert model.has_person(alice())
        assert model.get_filtered_person_list() == [alice()]

    def test_add_duplicate_raises_error(self):
        model = ModelManager(typical_address_book())

        with pytest.raises(DuplicatePersonError):
            model.add_person(alice())

    def test_set_and_delete_person(self):
        model = ModelManager(typical_address_book())
        edited = carl().model_copy(update={"note": Note("Prefers email")})

        model.set_person(carl(), edited)
        model.delete_person(alice())

        assert model.get_filtered_person_list() == [benson(), edited]


class TestFilteredList:
    """Tests for the filtered view."""

    def test_predicate_applies_live(self):
        model = ModelManager(typical_address_book())

        model.update_filtered_person_list(lambda p: p.tags.contains_tag_type(TagType("Skill")))

        assert model.get_filtered_person_list() == [alice(), benson()]
        assert model.get_filtered_number_of_persons() == 2
        assert model.get_total_number_of_persons() == 3

        model.delete_person(benson())
        assert model.get_filtered_person_list() == [alice()]

    def test_show_all(self):
        model = ModelManager(typical_address_book())
        model.update_filtered_person_list(lambda p: False)

        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

        assert model.get_filtered_number_of_persons() == 3


class TestHistory:
    """Tests for commit, undo and redo."""

    def test_undo_after_commit_restores_prior_dataset(self):
        model = ModelManager(AddressBook([alice()]))
        before = model.get_address_book()

        model.add_person(benson())
        model.commit_address_book()
        model.undo_address_book()

        assert model.get_address_book() == before

    def test_redo_after_undo_restores_committed_dataset(self):
        model = ModelManager(AddressBook([alice()]))
        model.add_person(benson())
        model.commit_address_book()
        after = model.get_address_book()

        model.undo_address_book()
        model.redo_address_book()

        assert model.get_address_book() == after

    def test_commit_clears_redo(self):
        model = ModelManager()
        model.add_person(alice())
        model.commit_address_book()
        model.undo_address_book()
        assert model.can_redo_address_book()

        model.add_person(carl())
        model.commit_address_book()

        assert not model.can_redo_address_book()

    def test_undo_without_history_raises_error(self):
        with pytest.raises(HistoryError):
            ModelManager().undo_address_book()

    def test_history_depth_is_bounded(self):
        model = ModelManager(max_history_depth=1)
        model.add_person(alice())
        model.commit_address_book()
        model.add_person(benson())
        model.commit_address_book()

        model.undo_address_book()

        assert not model.can_undo_address_book()
        assert model.get_address_book() == AddressBook([alice()])


class TestTagTypes:
    """Tests for tag type maintenance."""

    def test_delete_tag_type_for_all_person(self):
        model = ModelManager(typical_address_book())

        model.delete_tag_type_for_all_person(TagType("Skill"))

        assert not model.has_tag_type(TagType("Skill"))
        assert model.has_tag_type(TagType("Employer"))
        assert model.get_total_number_of_persons() == 3

    def test_edit_tag_type_for_all_person(self):
        model = ModelManager(typical_address_book())

        model.edit_tag_type_for_all_person(TagType("Skill"), TagType("Language"))

        assert not model.has_tag_type(TagType("Skill"))
        assert model.get_filtered_person_list()[1].tags.to_dict() == {"Language": ["Go"]}


class TestSnapshotIsolation:
    """Persons handed out by the model cannot rewrite history."""

    def test_tag_mutation_of_listed_person_rejected(self):
        model = ModelManager(typical_address_book())
        model.set_person(carl(), carl().model_copy(update={"note": Note("Call back")}))
        model.commit_address_book()

        with pytest.raises(TypeError):
            model.get_filtered_person_list()[0].tags.remove_tag_type(TagType("Skill"))
        model.undo_address_book()

        assert model.get_address_book() == typical_address_book()
        assert model.get_address_book().persons[0] == alice()
