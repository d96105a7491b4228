"""Tests for typed conversion."""

import pytest
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from json_element import (
    InvalidArgumentError,
    JsonDocument,
    JsonNamingPolicy,
    JsonSerializer,
    JsonSerializerOptions,
    MaxDepthExceededError,
    convert_document_to_object,
    convert_to_object,
    serialize_to_element,
)
from json_element.types import ErrorType

from conftest import Address, Person, parse


class Product(BaseModel):
    product_id: int = Field(alias="sku")
    unit_price: float


class StrictItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    a: int


class OpenItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    a: int


class ItemByName(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="sku")


class TestRoundTrip:
    """Tests for serialize_to_element followed by convert_to_object."""

    def test_round_trip_default_options(self, sample_person):
        """Test a record survives a round trip with default options."""
        element = serialize_to_element(sample_person)

        assert element.get_property("display_name").get_string() == "Alice J."
        assert convert_to_object(element, Person) == sample_person

    def test_round_trip_web_options(self, sample_person):
        """Test a record survives a round trip with camelCase names."""
        options = JsonSerializerOptions.web()
        element = serialize_to_element(sample_person, options)

        assert element.get_property("displayName").get_string() == "Alice J."
        assert element.get_property("address").get_property("postalCode").get_string() == "10001"
        assert element.try_get_property("display_name") is None
        assert convert_to_object(element, Person, options) == sample_person

    def test_round_trip_pydantic_model(self):
        """Test explicit aliases win over the naming policy."""
        options = JsonSerializerOptions(naming_policy=JsonNamingPolicy.CAMEL_CASE)
        product = Product(sku=5, unit_price=2.5)

        element = serialize_to_element(product, options)

        assert element.get_raw_text() == '{"sku":5,"unitPrice":2.5}'
        assert convert_to_object(element, Product, options) == product


class TestConvertToObject:
    """Tests for convert_to_object and convert_document_to_object."""

    def test_convert_record(self):
        element = parse('{"street":"1 Main St","city":"Springfield","postal_code":"12345"}')

        assert convert_to_object(element, Address) == Address("1 Main St", "Springfield", "12345")

    def test_convert_method_form(self):
        element = parse('{"street":"a","city":"b","postal_code":"c"}')

        assert element.convert_to_object(Address) == Address("a", "b", "c")

    def test_convert_list(self):
        assert convert_to_object(parse("[1,2,3]"), List[int]) == [1, 2, 3]

    def test_convert_optional_record(self):
        """Test Optional hints still follow the naming policy."""
        element = parse('{"street":"a","city":"b","postalCode":"c"}')

        result = convert_to_object(element, Optional[Address], JsonSerializerOptions.web())

        assert result == Address("a", "b", "c")

    def test_dict_keys_untouched(self):
        """Test mapping keys are not renamed, only record fields."""
        element = parse('{"Home":{"street":"a","city":"b","postalCode":"c"}}')

        result = convert_to_object(element, Dict[str, Address], JsonSerializerOptions.web())

        assert result == {"Home": Address("a", "b", "c")}

    def test_list_of_records(self):
        element = parse('[{"street":"a","city":"b","postalCode":"c"}]')

        result = convert_to_object(element, List[Address], JsonSerializerOptions.web())

        assert result == [Address("a", "b", "c")]

    def test_case_insensitive_names(self):
        """Test case-insensitive property matching."""
        element = parse('{"STREET":"a","City":"b","postal_code":"c"}')
        options = JsonSerializerOptions(property_name_case_insensitive=True)

        assert convert_to_object(element, Address, options) == Address("a", "b", "c")

    def test_case_sensitive_by_default(self):
        """Test wrongly cased names do not match and the missing field is reported."""
        element = parse('{"STREET":"a","city":"b","postal_code":"c"}')

        with pytest.raises(ValidationError):
            convert_to_object(element, Address)

    def test_unmatched_property_ignored_by_dataclass(self):
        element = parse('{"street":"a","city":"b","postal_code":"c","floor":3}')

        assert convert_to_object(element, Address) == Address("a", "b", "c")

    def test_forbidden_extra_property_rejected(self):
        """Test a model forbidding extras sees the unmatched property."""
        element = parse('{"a":1,"b":2}')

        with pytest.raises(ValidationError):
            StrictItem.model_validate_json(element.get_raw_text())
        with pytest.raises(ValidationError):
            convert_to_object(element, StrictItem)

    def test_allowed_extra_property_kept(self):
        result = convert_to_object(parse('{"a":1,"b":2}'), OpenItem)

        assert result.a == 1
        assert result.b == 2

    def test_populate_by_field_name(self):
        """Test a model accepting field names converts either key."""
        assert convert_to_object(parse('{"product_id":5}'), ItemByName).product_id == 5
        assert convert_to_object(parse('{"sku":6}'), ItemByName).product_id == 6

        options = JsonSerializerOptions.web()
        assert convert_to_object(parse('{"productId":7}'), ItemByName, options).product_id == 7

    def test_type_mismatch_propagates(self):
        with pytest.raises(ValidationError):
            convert_to_object(parse('["x"]'), List[int])

    def test_ignore_null_values_on_read(self, sample_person):
        """Test ignored nulls let field defaults apply."""
        element = serialize_to_element(sample_person).set_property("role", None)

        options = JsonSerializerOptions(ignore_null_values=True)
        assert convert_to_object(element, Person, options).role == "member"

        with pytest.raises(ValidationError):
            convert_to_object(element, Person)

    def test_max_depth(self):
        """Test conversion rejects elements nested beyond max_depth."""
        options = JsonSerializerOptions(max_depth=2)

        with pytest.raises(MaxDepthExceededError):
            convert_to_object(parse('{"a":{"b":{"c":1}}}'), dict, options)

    def test_convert_document(self):
        document = JsonDocument.parse('{"street":"a","city":"b","postal_code":"c"}')

        assert convert_document_to_object(document, Address) == Address("a", "b", "c")

    def test_convert_none_document(self):
        """Test a missing document raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="document cannot be None") as exc_info:
            convert_document_to_object(None, Address)

        assert exc_info.value.error_type == ErrorType.ARGUMENT
        assert isinstance(exc_info.value, ValueError)


class TestJsonSerializer:
    """Tests for JsonSerializer class."""

    def test_serialize_ignores_nulls(self, sample_person):
        serializer = JsonSerializer(JsonSerializerOptions(ignore_null_values=True))

        element = serializer.serialize_to_element(sample_person)

        assert element.try_get_property("nickname") is None
        assert element.get_property("role").get_string() == "member"

    def test_serialize_keeps_nulls_by_default(self, sample_person):
        element = JsonSerializer().serialize_to_element(sample_person)

        assert element.get_property("nickname").get_string() is None

    def test_serialize_indented(self):
        serializer = JsonSerializer(JsonSerializerOptions(write_indented=True))

        text = serializer.serialize(Address("a", "b", "c"))

        assert text == '{\n  "street": "a",\n  "city": "b",\n  "postal_code": "c"\n}'

    def test_serialize_to_utf8_bytes(self):
        data = JsonSerializer().serialize_to_utf8_bytes(Address("Zürich", "b", "c"))

        assert data == '{"street":"Zürich","city":"b","postal_code":"c"}'.encode("utf-8")

    def test_serialize_with_declared_type(self):
        element = JsonSerializer().serialize_to_element([1, 2], List[int])

        assert element.get_raw_text() == "[1,2]"

    def test_deserialize_text(self):
        serializer = JsonSerializer(JsonSerializerOptions.web())

        result = serializer.deserialize('{"street":"a","city":"b","postalCode":"c"}', Address)

        assert result == Address("a", "b", "c")
