"""Tests for attribute-name and qualified-name conventions."""

import pytest

from naming_conventions.domain.exceptions import InvalidArgumentError
from naming_conventions.domain.services import (
    attribute_name_to_property_name,
    qualified_attribute_name,
)
from tests.sample_types import Outer


class TestAttributeNameToPropertyName:
    def test_hyphenated_name_becomes_camel_case(self):
        assert attribute_name_to_property_name("transaction-manager") == "transactionManager"

    def test_multiple_hyphens(self):
        assert attribute_name_to_property_name("a-b-c") == "aBC"

    def test_name_without_hyphen_is_unchanged(self):
        assert attribute_name_to_property_name("transactionManager") == "transactionManager"

    @pytest.mark.parametrize("name", ["", "plain", "camelCase", "snake_case"])
    def test_idempotent_without_hyphens(self, name):
        once = attribute_name_to_property_name(name)
        assert attribute_name_to_property_name(once) == once

    def test_trailing_hyphen_is_dropped(self):
        assert attribute_name_to_property_name("bean-") == "bean"

    def test_consecutive_hyphens(self):
        assert attribute_name_to_property_name("a--b") == "aB"

    def test_output_length(self):
        name = "data-source-ref"
        result = attribute_name_to_property_name(name)
        assert len(result) == len(name) - name.count("-")

    def test_other_characters_pass_through(self):
        assert attribute_name_to_property_name("x-1st_Item") == "x1st_Item"

    def test_custom_separator(self):
        assert attribute_name_to_property_name("data.source", separator=".") == "dataSource"

    def test_none_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            attribute_name_to_property_name(None)


class TestQualifiedAttributeName:
    def test_string_scope(self):
        assert (
            qualified_attribute_name("com.example.Widget", "foo")
            == "com.example.Widget.foo"
        )

    def test_class_scope_uses_fully_qualified_name(self):
        assert (
            qualified_attribute_name(Outer, "foo") == "tests.sample_types.Outer.foo"
        )

    def test_no_validation_of_separators(self):
        assert qualified_attribute_name("a.", ".b") == "a...b"

    def test_none_scope_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            qualified_attribute_name(None, "foo")

    def test_none_attribute_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            qualified_attribute_name("scope", None)
