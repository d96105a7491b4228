"""Rebuilding immutable JSON objects with added and removed properties."""

import io
import logging
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional
from uuid import UUID

from .io.json_writer import JsonWriter
from .models import JsonElement, JsonProperty
from .options import JsonDocumentOptions, JsonWriterOptions
from .parser import JsonParser
from .profiler import PerformanceProfiler
from .types import InvalidShapeError, JsonValueKind
from .utils.properties import get_properties


MutateCallback = Callable[[JsonWriter, List[str]], None]

MISSING = object()

SCALAR_TYPES = (str, bool, int, float, Decimal, datetime, date, time, UUID, Enum)


def is_scalar(value: Any) -> bool:
    """Check whether a value is written directly rather than as a nested object."""
    return value is None or isinstance(value, SCALAR_TYPES)


def render_value(writer: JsonWriter, value: Any) -> None:
    """
    Write a single value using the scalar encoding rules.

    Strings, booleans and numbers map to their JSON counterparts. Dates and
    times are written as ISO-8601 strings, UUIDs in canonical hyphenated
    form and enum members by name. JsonElement values are copied verbatim.
    Anything else is written as the string returned by str().
    """
    if value is None:
        writer.write_null_value()
    elif isinstance(value, JsonElement):
        value.write_to(writer)
    elif isinstance(value, Enum):
        writer.write_string_value(value.name)
    elif isinstance(value, str):
        writer.write_string_value(value)
    elif isinstance(value, bool):
        writer.write_boolean_value(value)
    elif isinstance(value, (int, float, Decimal)):
        writer.write_number_value(value)
    elif isinstance(value, (datetime, date, time)):
        writer.write_string_value(value.isoformat())
    elif isinstance(value, UUID):
        writer.write_string_value(str(value))
    else:
        writer.write_string_value(str(value))


def write_named_value(writer: JsonWriter, name: str, value: Any) -> None:
    """
    Write ``name: value`` into the object currently open on the writer.

    Lists and tuples become arrays whose items use render_value. JsonElement
    values are copied verbatim. Scalars are written directly. Any other value
    is written as a nested object built from get_properties(), one level
    deep.
    """
    writer.write_property_name(name)

    if isinstance(value, JsonElement) or is_scalar(value):
        render_value(writer, value)
        return

    if isinstance(value, (list, tuple)):
        writer.write_start_array()
        for item in value:
            render_value(writer, item)
        writer.write_end_array()
        return

    writer.write_start_object()
    for prop_name, prop_value in get_properties(value):
        writer.write_property_name(prop_name)
        render_value(writer, prop_value)
    writer.write_end_object()


class ObjectRebuilder:
    """
    Produces new JSON objects from existing ones with properties added or removed.

    JsonElement is immutable, so every rebuild writes a new object into an
    in-memory buffer: first whatever the mutate callback writes, then every
    source property whose name was not marked for removal, in source order.
    The buffer is then parsed into a new element. Additions are never
    filtered by the removal list, so adding a name that also exists on the
    source yields a duplicate key unless that name is removed in the same
    rebuild (see set_property).
    """

    def __init__(self, writer_options: Optional[JsonWriterOptions] = None,
                 document_options: Optional[JsonDocumentOptions] = None,
                 logger: Optional[logging.Logger] = None,
                 profiler: Optional[PerformanceProfiler] = None):
        """
        Initialize the rebuilder.

        Args:
            writer_options: Optional JsonWriterOptions for the intermediate output
            document_options: Optional JsonDocumentOptions for re-parsing
            logger: Optional logger instance
            profiler: Optional profiler recording each rebuild
        """
        self.writer_options = writer_options or JsonWriterOptions()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = JsonParser(document_options, self.logger)
        self.profiler = profiler

    def rebuild(self, element: JsonElement, mutate: Optional[MutateCallback] = None) -> JsonElement:
        """
        Rebuild an object, letting a callback add and remove properties.

        Args:
            element: Source object element (left unchanged)
            mutate: Callback receiving the JsonWriter, positioned inside the
                new object, and a list to which names of source properties
                to drop can be appended

        Returns:
            A new JsonElement

        Raises:
            InvalidShapeError: If element is not an object
        """
        if element.value_kind is not JsonValueKind.OBJECT:
            raise InvalidShapeError(
                "Only able to add or remove properties on JSON objects "
                f"(got {element.value_kind.value})",
                context={"value_kind": element.value_kind}
            )

        if self.profiler is None:
            return self._rebuild(element, mutate)

        input_size = len(element.get_raw_text().encode("utf-8"))
        with self.profiler.profile_operation("rebuild_object", input_size) as profiler:
            result = self._rebuild(element, mutate, profiler)
        return result

    def add_null_property(self, element: JsonElement, name: str) -> JsonElement:
        """Return a copy of element with ``name: null`` added."""
        return self.rebuild(element, lambda writer, names_to_remove: writer.write_null(name))

    def add_property(self, element: JsonElement, name_or_property: Any, value: Any = MISSING) -> JsonElement:
        """
        Return a copy of element with one property added.

        Args:
            element: Source object element
            name_or_property: A JsonProperty to copy verbatim, or the new property name
            value: The value to write when a name is given

        Returns:
            A new JsonElement
        """
        if isinstance(name_or_property, JsonProperty):
            if value is not MISSING:
                raise TypeError("add_property() takes no value when given a JsonProperty")
            return self.rebuild(element, lambda writer, names_to_remove: name_or_property.write_to(writer))

        if value is MISSING:
            raise TypeError("add_property() requires a value when given a property name")

        return self.rebuild(
            element,
            lambda writer, names_to_remove: write_named_value(writer, name_or_property, value)
        )

    def set_property(self, element: JsonElement, name: str, value: Any) -> JsonElement:
        """Return a copy of element where ``name`` holds value exactly once."""
        def mutate(writer: JsonWriter, names_to_remove: List[str]) -> None:
            names_to_remove.append(name)
            write_named_value(writer, name, value)

        return self.rebuild(element, mutate)

    def remove_property(self, element: JsonElement, name: str) -> JsonElement:
        """Return a copy of element without the named property."""
        return self.rebuild(element, lambda writer, names_to_remove: names_to_remove.append(name))

    def remove_properties(self, element: JsonElement, names: Iterable[str]) -> JsonElement:
        """Return a copy of element without any of the named properties."""
        names = list(names)
        return self.rebuild(element, lambda writer, names_to_remove: names_to_remove.extend(names))

    def _rebuild(self, element: JsonElement, mutate: Optional[MutateCallback],
                 profiler: Optional[PerformanceProfiler] = None) -> JsonElement:
        buffer = io.BytesIO()
        names_to_remove: List[str] = []

        with JsonWriter(buffer, self.writer_options, self.logger) as writer:
            writer.write_start_object()

            if mutate is not None:
                mutate(writer, names_to_remove)

            removed = set(names_to_remove)
            for prop in element.enumerate_object():
                if prop.name not in removed:
                    prop.write_to(writer)

            writer.write_end_object()

        written = buffer.getvalue()
        if profiler is not None:
            profiler.record_output(len(written))

        result = self.parser.parse_element(written.decode("utf-8"))
        self.logger.debug(f"Rebuilt object: {element.get_property_count()} source properties, "
                          f"{len(names_to_remove)} marked for removal, "
                          f"{result.get_property_count()} in result")
        return result
