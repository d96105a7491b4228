"""Conversion between JSON elements and typed Python values."""

import collections.abc
import dataclasses
import io
import logging
import types
import typing
from functools import lru_cache
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

from .io.json_writer import JsonWriter
from .models import JsonDocument, JsonElement
from .options import JsonDocumentOptions, JsonSerializerOptions, JsonWriterOptions
from .parser import JsonParser
from .types import InvalidArgumentError, JsonValueKind
from .utils.naming import convert_name

T = TypeVar("T")

_UNION_TYPES = (Union, types.UnionType) if hasattr(types, "UnionType") else (Union,)


@lru_cache(maxsize=256)
def _cached_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def get_type_adapter(target_type: Any) -> TypeAdapter:
    """Return a (cached where possible) pydantic TypeAdapter for a type."""
    try:
        return _cached_adapter(target_type)
    except TypeError:
        # unhashable type hints cannot be cached
        return TypeAdapter(target_type)


@dataclasses.dataclass(frozen=True)
class _FieldBinding:
    """How one record field maps between its Python key and its JSON name."""
    python_key: str
    json_name: str
    hint: Any
    inbound_only: bool = False


class JsonSerializer:
    """
    Typed (de)serialization of JSON elements.

    Decoding and encoding are delegated to pydantic. Before decoding (and
    after encoding) the element is rewritten so that record property names
    follow the configured naming policy and null-valued properties are
    dropped when ignore_null_values is set. The rewrite follows the target
    type through dataclasses, pydantic models, sequences, mappings and
    Optional/Union hints; everything else is copied verbatim.
    """

    def __init__(self, options: Optional[JsonSerializerOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the serializer.

        Args:
            options: Optional JsonSerializerOptions
            logger: Optional logger instance
        """
        self.options = options or JsonSerializerOptions()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = JsonParser(JsonDocumentOptions(max_depth=self.options.max_depth), self.logger)

    # Decoding

    def convert_to_object(self, element: JsonElement, target_type: Type[T]) -> T:
        """
        Convert a JSON element into an instance of target_type.

        Args:
            element: Element to convert
            target_type: Type to decode into (dataclass, pydantic model, builtin, generic alias)

        Returns:
            The decoded value

        Raises:
            pydantic.ValidationError: If the element does not fit target_type
        """
        data = self._rewrite_to_bytes(element, target_type, inbound=True)
        result = get_type_adapter(target_type).validate_json(data)
        self.logger.debug(f"Converted {element.value_kind.value} element to {_type_name(target_type)}")
        return result

    def deserialize(self, json_text: Union[str, bytes, bytearray], target_type: Type[T]) -> T:
        """Parse JSON text and convert it into an instance of target_type."""
        return self.convert_to_object(self.parser.parse_element(json_text), target_type)

    # Encoding

    def serialize_to_element(self, value: Any, value_type: Optional[Any] = None) -> JsonElement:
        """
        Encode a typed value as a JSON element.

        Args:
            value: Value to encode
            value_type: Declared type of value (defaults to type(value))

        Returns:
            JsonElement holding the encoded value
        """
        value_type = value_type if value_type is not None else type(value)
        encoded = get_type_adapter(value_type).dump_json(
            value,
            by_alias=True,
            exclude_none=self.options.ignore_null_values
        )
        element = self.parser.parse_element(encoded)
        data = self._rewrite_to_bytes(element, value_type, inbound=False)
        return self.parser.parse_element(data)

    def serialize_to_utf8_bytes(self, value: Any, value_type: Optional[Any] = None) -> bytes:
        element = self.serialize_to_element(value, value_type)
        return element.to_json_string(indented=self.options.write_indented).encode("utf-8")

    def serialize(self, value: Any, value_type: Optional[Any] = None) -> str:
        """Encode a typed value as JSON text."""
        element = self.serialize_to_element(value, value_type)
        return element.to_json_string(indented=self.options.write_indented)

    # Rewriting

    def _rewrite_to_bytes(self, element: JsonElement, hint: Any, inbound: bool) -> bytes:
        buffer = io.BytesIO()
        writer_options = JsonWriterOptions(max_depth=self.options.max_depth)
        with JsonWriter(buffer, writer_options, self.logger) as writer:
            self._rewrite(writer, element, hint, inbound)
        return buffer.getvalue()

    def _rewrite(self, writer: JsonWriter, element: JsonElement, hint: Any, inbound: bool) -> None:
        kind = element.value_kind

        if kind is JsonValueKind.OBJECT:
            bindings = _record_bindings(_select_candidate(hint, kind), self.options)
            if bindings is not None:
                self._rewrite_record(writer, element, bindings, inbound)
                return

            value_hint = _mapping_value_hint(_select_candidate(hint, kind))
            if value_hint is not None:
                writer.write_start_object()
                for prop in element.enumerate_object():
                    writer.write_property_name(prop.name)
                    self._rewrite(writer, prop.value, value_hint, inbound)
                writer.write_end_object()
                return

        elif kind is JsonValueKind.ARRAY:
            item_hints = _sequence_item_hints(_select_candidate(hint, kind))
            if item_hints is not None:
                writer.write_start_array()
                for index, item in enumerate(element.enumerate_array()):
                    self._rewrite(writer, item, item_hints(index), inbound)
                writer.write_end_array()
                return

        element.write_to(writer)

    def _rewrite_record(self, writer: JsonWriter, element: JsonElement,
                        bindings: List[_FieldBinding], inbound: bool) -> None:
        lookup = {}
        for binding in bindings:
            if inbound:
                lookup.setdefault(self._match_key(binding.json_name), binding)
            elif not binding.inbound_only:
                lookup.setdefault(binding.python_key, binding)

        writer.write_start_object()
        for prop in element.enumerate_object():
            if self.options.ignore_null_values and prop.value.value_kind is JsonValueKind.NULL:
                continue

            binding = lookup.get(self._match_key(prop.name) if inbound else prop.name)
            if binding is None:
                # unmatched names are left for the target's extra-field policy
                if inbound:
                    self.logger.debug(f"Passing through unmatched property '{prop.name}'")
                writer.write_property_name(prop.name)
                prop.value.write_to(writer)
                continue

            writer.write_property_name(binding.python_key if inbound else binding.json_name)
            self._rewrite(writer, prop.value, binding.hint, inbound)
        writer.write_end_object()

    def _match_key(self, name: str) -> str:
        return name.casefold() if self.options.property_name_case_insensitive else name


def _type_name(hint: Any) -> str:
    return getattr(hint, "__name__", None) or repr(hint)


def _strip_annotated(hint: Any) -> Any:
    while typing.get_origin(hint) is typing.Annotated:
        hint = typing.get_args(hint)[0]
    return hint


def _select_candidate(hint: Any, kind: JsonValueKind) -> Any:
    """Pick the member of an Optional/Union hint that fits an element kind."""
    hint = _strip_annotated(hint)
    if typing.get_origin(hint) not in _UNION_TYPES:
        return hint

    members = [_strip_annotated(arg) for arg in typing.get_args(hint) if arg is not type(None)]
    for member in members:
        if kind is JsonValueKind.OBJECT and (
                _is_record_type(member) or _mapping_value_hint(member) is not None):
            return member
        if kind is JsonValueKind.ARRAY and _sequence_item_hints(member) is not None:
            return member
    return Any


def _is_record_type(hint: Any) -> bool:
    if not isinstance(hint, type) or typing.get_origin(hint) is not None:
        return False
    return dataclasses.is_dataclass(hint) or issubclass(hint, BaseModel)


def _record_bindings(hint: Any, options: JsonSerializerOptions) -> Optional[List[_FieldBinding]]:
    """Field bindings of a dataclass or pydantic model type, else None."""
    if not _is_record_type(hint):
        return None

    if issubclass(hint, BaseModel):
        config = hint.model_config
        by_name = bool(config.get("populate_by_name") or config.get("validate_by_name"))
        bindings = []
        name_bindings = []
        for name, info in hint.model_fields.items():
            key = info.alias or name
            json_name = info.alias or convert_name(name, options.naming_policy)
            bindings.append(_FieldBinding(key, json_name, info.annotation))
            if by_name and info.alias:
                name_bindings.append(
                    _FieldBinding(name, convert_name(name, options.naming_policy), info.annotation, True)
                )
        # aliases take precedence over field names
        return bindings + name_bindings

    try:
        resolved = typing.get_type_hints(hint, include_extras=True)
    except (NameError, TypeError):
        resolved = {}

    return [
        _FieldBinding(field.name, convert_name(field.name, options.naming_policy),
                      resolved.get(field.name, Any))
        for field in dataclasses.fields(hint)
        if field.init
    ]


def _mapping_value_hint(hint: Any) -> Optional[Any]:
    """Value type of a mapping hint (dict, Dict[str, V], Mapping[str, V]), else None."""
    origin = typing.get_origin(hint) or hint
    if not isinstance(origin, type) or not issubclass(origin, collections.abc.Mapping):
        return None
    args = typing.get_args(hint)
    return args[1] if len(args) == 2 else Any


def _sequence_item_hints(hint: Any):
    """Return index -> item hint for list/tuple/set hints, else None."""
    origin = typing.get_origin(hint) or hint
    if not isinstance(origin, type) or issubclass(origin, (str, bytes, bytearray)):
        return None
    if not issubclass(origin, (collections.abc.Sequence, collections.abc.Set)):
        return None

    args = typing.get_args(hint)
    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        fixed: Tuple[Any, ...] = args
        return lambda index: fixed[index] if index < len(fixed) else Any

    item_hint = args[0] if args else Any
    return lambda index: item_hint


def convert_to_object(element: JsonElement, target_type: Type[T],
                      options: Optional[JsonSerializerOptions] = None) -> T:
    """Convert a JSON element into an instance of target_type."""
    return JsonSerializer(options).convert_to_object(element, target_type)


def convert_document_to_object(document: Optional[JsonDocument], target_type: Type[T],
                               options: Optional[JsonSerializerOptions] = None) -> T:
    """
    Convert the root element of a JSON document into an instance of target_type.

    Raises:
        InvalidArgumentError: If document is None
    """
    if document is None:
        raise InvalidArgumentError("document cannot be None", context={"argument": "document"})
    return convert_to_object(document.root_element, target_type, options)


def serialize_to_element(value: Any, options: Optional[JsonSerializerOptions] = None,
                         value_type: Optional[Any] = None) -> JsonElement:
    """Encode a typed value as a JSON element."""
    return JsonSerializer(options).serialize_to_element(value, value_type)
