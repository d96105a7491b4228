"""Tests for naming policies."""

import pytest

from json_element.utils.naming import JsonNamingPolicy, convert_name


class TestConvertName:
    """Tests for convert_name function."""

    @pytest.mark.parametrize("policy,expected", [
        (JsonNamingPolicy.NONE, "first_name"),
        (JsonNamingPolicy.CAMEL_CASE, "firstName"),
        (JsonNamingPolicy.PASCAL_CASE, "FirstName"),
        (JsonNamingPolicy.SNAKE_CASE_LOWER, "first_name"),
        (JsonNamingPolicy.SNAKE_CASE_UPPER, "FIRST_NAME"),
        (JsonNamingPolicy.KEBAB_CASE_LOWER, "first-name"),
        (JsonNamingPolicy.KEBAB_CASE_UPPER, "FIRST-NAME"),
    ])
    def test_policies(self, policy, expected):
        assert convert_name("first_name", policy) == expected

    def test_single_word(self):
        """Test single lowercase words are unchanged by camel case."""
        assert convert_name("name", JsonNamingPolicy.CAMEL_CASE) == "name"
        assert convert_name("name", JsonNamingPolicy.PASCAL_CASE) == "Name"

    def test_snake_from_camel(self):
        assert convert_name("firstName", JsonNamingPolicy.SNAKE_CASE_LOWER) == "first_name"
