"""Tests for configuration options."""

import pytest

from json_element.options import JsonDocumentOptions, JsonSerializerOptions, JsonWriterOptions
from json_element.types import InvalidArgumentError
from json_element.utils.naming import JsonNamingPolicy


class TestJsonWriterOptions:
    """Tests for JsonWriterOptions class."""

    def test_defaults(self):
        options = JsonWriterOptions()

        assert options.indented is False
        assert options.indent_size == 2
        assert options.max_depth == 1000
        assert options.skip_validation is False
        assert options.ensure_ascii is False

    def test_invalid_values(self):
        with pytest.raises(InvalidArgumentError, match="max_depth must be positive"):
            JsonWriterOptions(max_depth=0)
        with pytest.raises(InvalidArgumentError, match="indent_size must be non-negative"):
            JsonWriterOptions(indent_size=-1)

    def test_from_dict_ignores_unknown_keys(self):
        options = JsonWriterOptions.from_dict({"indented": True, "colour": "blue"})

        assert options == JsonWriterOptions(indented=True)
        assert options.to_dict()["indented"] is True


class TestJsonDocumentOptions:
    """Tests for JsonDocumentOptions class."""

    def test_default_max_depth(self):
        assert JsonDocumentOptions().max_depth == 64

    def test_invalid_max_depth(self):
        with pytest.raises(InvalidArgumentError):
            JsonDocumentOptions(max_depth=-1)

    def test_dict_round_trip(self):
        options = JsonDocumentOptions(max_depth=8)

        assert JsonDocumentOptions.from_dict(options.to_dict()) == options


class TestJsonSerializerOptions:
    """Tests for JsonSerializerOptions class."""

    def test_defaults(self):
        options = JsonSerializerOptions()

        assert options.naming_policy == JsonNamingPolicy.NONE
        assert options.property_name_case_insensitive is False
        assert options.ignore_null_values is False
        assert options.max_depth == 64
        assert options.write_indented is False

    def test_web_preset(self):
        options = JsonSerializerOptions.web()

        assert options.naming_policy == JsonNamingPolicy.CAMEL_CASE
        assert options.property_name_case_insensitive is True

    def test_to_dict(self):
        assert JsonSerializerOptions.web().to_dict() == {
            "naming_policy": "camelCase",
            "property_name_case_insensitive": True,
            "ignore_null_values": False,
            "max_depth": 64,
            "write_indented": False,
        }

    def test_dict_round_trip(self):
        options = JsonSerializerOptions(
            naming_policy=JsonNamingPolicy.KEBAB_CASE_UPPER,
            ignore_null_values=True,
            max_depth=10
        )

        assert JsonSerializerOptions.from_dict(options.to_dict()) == options

    def test_unknown_naming_policy(self):
        with pytest.raises(InvalidArgumentError, match="Unknown naming policy"):
            JsonSerializerOptions.from_dict({"naming_policy": "shouting"})

    def test_naming_policy_type_checked(self):
        with pytest.raises(InvalidArgumentError, match="naming_policy must be a JsonNamingPolicy"):
            JsonSerializerOptions(naming_policy="camelCase")

    def test_options_are_immutable(self):
        with pytest.raises(AttributeError):
            JsonSerializerOptions().max_depth = 1
