"""Unit tests for person and tag value objects."""

import pytest
from pydantic import ValidationError

from rolodex.domain.value import (
    Address,
    Email,
    Index,
    Name,
    Note,
    Phone,
    Status,
    TagName,
    TagType,
)


class TestName:
    @pytest.mark.parametrize("value", ["Alex Yeoh", "peter jack", "12345", "Capital Tan 2nd"])
    def test_valid(self, value):
        assert Name(value).root == value

    @pytest.mark.parametrize("value", ["", " ", " leading", "peter*"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Name(value)


class TestPhone:
    def test_valid(self):
        assert str(Phone("911")) == "911"

    @pytest.mark.parametrize("value", ["", "91", "phone", "9011p041", "9312 1534"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Phone(value)


class TestEmail:
    @pytest.mark.parametrize(
        "value", ["alexyeoh@example.com", "a@bc", "test.name+tag@sub.example-domain.org"]
    )
    def test_valid(self, value):
        assert Email(value).root == value

    @pytest.mark.parametrize("value", ["", "@example.com", "peterjack@", "peter jack@example.com"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Email(value)


class TestAddress:
    def test_valid(self):
        assert Address("Blk 456, Den Road, #01-355").root == "Blk 456, Den Road, #01-355"

    @pytest.mark.parametrize("value", ["", " "])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Address(value)


class TestStatusAndNote:
    def test_status(self):
        assert Status("Application Received").root == "Application Received"
        with pytest.raises(ValidationError):
            Status("double  space")

    def test_note_may_be_empty(self):
        assert Note("").root == ""
        with pytest.raises(ValidationError):
            Note("x" * 1001)


class TestTagValues:
    def test_tag_type_allows_words(self):
        assert TagType("Past Employer").root == "Past Employer"

    @pytest.mark.parametrize("value", ["", "Skill!", " Skill", "x" * 31])
    def test_tag_type_invalid(self, value):
        with pytest.raises(ValidationError):
            TagType(value)

    def test_tag_name_rejects_spaces(self):
        with pytest.raises(ValidationError):
            TagName("Machine Learning")

    def test_tag_type_is_hashable_by_value(self):
        assert {TagType("Skill"): 1}[TagType("Skill")] == 1


class TestIndex:
    def test_one_and_zero_based(self):
        index = Index(3)

        assert index.one_based == 3
        assert index.zero_based == 2
        assert Index.from_zero_based(2) == index

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError):
            Index(0)
