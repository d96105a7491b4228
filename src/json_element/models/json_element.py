"""Immutable JSON element model."""

import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Iterator, Optional, Type, TypeVar, TYPE_CHECKING

from ..io.json_writer import JsonWriter
from ..options import JsonSerializerOptions, JsonWriterOptions
from ..types import InvalidShapeError, JsonValueKind
from .json_property import JsonProperty

if TYPE_CHECKING:
    from ..rebuilder import MutateCallback

T = TypeVar("T")


@dataclass(frozen=True, repr=False)
class JsonElement:
    """
    An immutable JSON value.

    Objects hold an ordered tuple of JsonProperty (duplicate names are kept in
    document order), arrays an ordered tuple of JsonElement, strings their
    text and numbers their raw JSON number text. Equality is structural and
    order-sensitive.

    Elements are never changed in place. The add/remove helpers return a new
    element built by writing the object out with the requested changes and
    parsing the result, so batch several changes into one mutate() call when
    many are needed.
    """

    value_kind: JsonValueKind
    payload: Any = None

    # Kind-specific reads

    def enumerate_object(self) -> Iterator[JsonProperty]:
        """Iterate over the properties of an object in document order."""
        self._require(JsonValueKind.OBJECT)
        return iter(self.payload)

    def enumerate_array(self) -> Iterator['JsonElement']:
        """Iterate over the items of an array in order."""
        self._require(JsonValueKind.ARRAY)
        return iter(self.payload)

    def get_array_length(self) -> int:
        self._require(JsonValueKind.ARRAY)
        return len(self.payload)

    def get_property_count(self) -> int:
        self._require(JsonValueKind.OBJECT)
        return len(self.payload)

    def try_get_property(self, name: str) -> Optional['JsonElement']:
        """
        Look up a property value by name.

        When the object holds the same name more than once, the last
        occurrence wins.

        Returns:
            The property value, or None when no property has that name
        """
        self._require(JsonValueKind.OBJECT)
        for prop in reversed(self.payload):
            if prop.name == name:
                return prop.value
        return None

    def get_property(self, name: str) -> 'JsonElement':
        """
        Look up a property value by name.

        Raises:
            KeyError: If no property has that name
        """
        value = self.try_get_property(name)
        if value is None:
            raise KeyError(name)
        return value

    def get_string(self) -> Optional[str]:
        """Return the text of a string element, or None for a null element."""
        if self.value_kind is JsonValueKind.NULL:
            return None
        self._require(JsonValueKind.STRING)
        return self.payload

    def get_boolean(self) -> bool:
        if self.value_kind is JsonValueKind.TRUE:
            return True
        if self.value_kind is JsonValueKind.FALSE:
            return False
        raise InvalidShapeError(
            f"Expected a boolean element, got {self.value_kind.value}",
            context={"value_kind": self.value_kind}
        )

    def get_int(self) -> int:
        """
        Return the value of a number element as an int.

        Raises:
            ValueError: If the number is not written as an integer
        """
        self._require(JsonValueKind.NUMBER)
        try:
            return int(self.payload)
        except ValueError:
            raise ValueError(f"Number {self.payload} cannot be read as an integer")

    def get_float(self) -> float:
        self._require(JsonValueKind.NUMBER)
        return float(self.payload)

    def get_decimal(self) -> Decimal:
        self._require(JsonValueKind.NUMBER)
        try:
            return Decimal(self.payload)
        except InvalidOperation:
            raise ValueError(f"Number {self.payload} cannot be read as a Decimal")

    # Serialization

    def write_to(self, writer: JsonWriter) -> None:
        """Write this element, including all nested content, to a JsonWriter."""
        kind = self.value_kind
        if kind is JsonValueKind.OBJECT:
            writer.write_start_object()
            for prop in self.payload:
                prop.write_to(writer)
            writer.write_end_object()
        elif kind is JsonValueKind.ARRAY:
            writer.write_start_array()
            for item in self.payload:
                item.write_to(writer)
            writer.write_end_array()
        elif kind is JsonValueKind.STRING:
            writer.write_string_value(self.payload)
        elif kind is JsonValueKind.NUMBER:
            writer.write_raw_number(self.payload)
        elif kind is JsonValueKind.TRUE:
            writer.write_boolean_value(True)
        elif kind is JsonValueKind.FALSE:
            writer.write_boolean_value(False)
        else:
            writer.write_null_value()

    def to_json_string(self, indented: bool = False) -> str:
        """Serialize this element to JSON text."""
        options = JsonWriterOptions(indented=indented)
        with JsonWriter(options=options) as writer:
            self.write_to(writer)
        return writer.stream.getvalue().decode("utf-8")

    def get_raw_text(self) -> str:
        """Return the compact JSON text of this element."""
        return self.to_json_string()

    def to_python(self) -> Any:
        """
        Convert this element to plain Python data (dict, list, str, int, float, bool, None).

        Duplicate object names resolve to the last occurrence.
        """
        kind = self.value_kind
        if kind is JsonValueKind.OBJECT:
            return {prop.name: prop.value.to_python() for prop in self.payload}
        if kind is JsonValueKind.ARRAY:
            return [item.to_python() for item in self.payload]
        if kind is JsonValueKind.NUMBER:
            return json.loads(self.payload)
        if kind is JsonValueKind.TRUE:
            return True
        if kind is JsonValueKind.FALSE:
            return False
        return self.payload

    # Rebuild helpers

    def mutate(self, mutate: Optional['MutateCallback']) -> 'JsonElement':
        """Rebuild this object, letting a callback add and remove properties."""
        from ..extensions import rebuild_object
        return rebuild_object(self, mutate)

    def add_null_property(self, name: str) -> 'JsonElement':
        from ..extensions import add_null_property
        return add_null_property(self, name)

    def add_property(self, name_or_property: Any, *args: Any) -> 'JsonElement':
        from ..extensions import add_property
        return add_property(self, name_or_property, *args)

    def set_property(self, name: str, value: Any) -> 'JsonElement':
        from ..extensions import set_property
        return set_property(self, name, value)

    def remove_property(self, name: str) -> 'JsonElement':
        from ..extensions import remove_property
        return remove_property(self, name)

    def remove_properties(self, names: Iterable[str]) -> 'JsonElement':
        from ..extensions import remove_properties
        return remove_properties(self, names)

    def convert_to_object(self, target_type: Type[T],
                          options: Optional[JsonSerializerOptions] = None) -> T:
        from ..conversion import convert_to_object
        return convert_to_object(self, target_type, options)

    # Dunder helpers

    def __str__(self) -> str:
        if self.value_kind is JsonValueKind.STRING:
            return self.payload
        return self.get_raw_text()

    def __repr__(self) -> str:
        return f"JsonElement({self.value_kind.name}, {self.get_raw_text()!r})"

    def _require(self, kind: JsonValueKind) -> None:
        if self.value_kind is not kind:
            raise InvalidShapeError(
                f"Expected a {kind.value} element, got {self.value_kind.value}",
                context={"value_kind": self.value_kind}
            )
