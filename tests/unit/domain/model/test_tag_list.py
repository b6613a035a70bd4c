"""Unit tests for Tag and UniqueTagList."""

import pytest

from rolodex.domain.error import DuplicateTagError, TagMapErrorKind, TagNotFoundError
from rolodex.domain.model import Tag, UniqueTagList
from rolodex.domain.value import TagType

SKILL = TagType("Skill")


class TestTag:
    """Tests for Tag value semantics."""

    def test_equal_by_type_and_name(self):
        assert Tag.of("Skill", "Java") == Tag.of("Skill", "Java")
        assert Tag.of("Skill", "Java") != Tag.of("Language", "Java")
        assert Tag.of("Skill", "Java") != Tag.of("Skill", "Go")

    def test_invalid_name_rejected(self):
        with pytest.raises(ValueError):
            Tag.of("Skill", "not alnum")


class TestAdd:
    """Tests for add method."""

    def test_add_appends_in_order(self):
        tags = UniqueTagList(SKILL)

        tags.add(Tag.of("Skill", "Java"))
        tags.add(Tag.of("Skill", "Go"))

        assert tags.names() == ["Java", "Go"]

    def test_add_duplicate_raises_error(self):
        tags = UniqueTagList.from_names(SKILL, ["Java"])

        with pytest.raises(DuplicateTagError) as exc_info:
            tags.add(Tag.of("Skill", "Java"))

        assert exc_info.value.kind == TagMapErrorKind.DUPLICATE_TAG
        assert tags.names() == ["Java"]

    def test_add_other_type_raises_error(self):
        tags = UniqueTagList(SKILL)

        with pytest.raises(ValueError, match="does not belong"):
            tags.add(Tag.of("Employer", "Google"))

    def test_constructor_rejects_duplicates(self):
        with pytest.raises(DuplicateTagError):
            UniqueTagList.from_names(SKILL, ["Java", "Java"])


class TestRemove:
    """Tests for remove method."""

    def test_remove_existing(self):
        tags = UniqueTagList.from_names(SKILL, ["Java", "Go"])

        tags.remove(Tag.of("Skill", "Java"))

        assert tags.names() == ["Go"]

    def test_remove_missing_raises_error(self):
        tags = UniqueTagList.from_names(SKILL, ["Go"])

        with pytest.raises(TagNotFoundError, match="Java"):
            tags.remove(Tag.of("Skill", "Java"))


class TestMerge:
    """Tests for merge method."""

    def test_merge_appends_all(self):
        tags = UniqueTagList.from_names(SKILL, ["Java"])

        tags.merge(UniqueTagList.from_names(SKILL, ["Go", "Rust"]))

        assert tags.names() == ["Java", "Go", "Rust"]

    def test_merge_with_duplicate_is_all_or_nothing(self):
        tags = UniqueTagList.from_names(SKILL, ["Java"])

        with pytest.raises(DuplicateTagError):
            tags.merge(UniqueTagList.from_names(SKILL, ["Go", "Java"]))

        assert tags.names() == ["Java"]

    def test_merge_other_type_raises_error(self):
        tags = UniqueTagList.from_names(SKILL, ["Java"])

        with pytest.raises(ValueError):
            tags.merge(UniqueTagList.from_names(TagType("Employer"), ["Google"]))


class TestCopy:
    """Copies must not share state."""

    def test_copy_is_independent(self):
        tags = UniqueTagList.from_names(SKILL, ["Java"])
        clone = tags.copy()

        clone.add(Tag.of("Skill", "Go"))

        assert tags.names() == ["Java"]
        assert clone != tags
