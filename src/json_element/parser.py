"""JSON parser producing immutable element trees."""

import json
import logging
from typing import Any, List, Optional, Tuple, Union

from .models import JsonDocument, JsonElement, JsonProperty
from .options import JsonDocumentOptions
from .types import JsonValueKind, MaxDepthExceededError


_TRUE = JsonElement(JsonValueKind.TRUE)
_FALSE = JsonElement(JsonValueKind.FALSE)
_NULL = JsonElement(JsonValueKind.NULL)


class JsonParser:
    """
    JSON parser built on the standard json module.

    Object members keep their document order and duplicate names are
    retained. Numbers keep their raw text so integer, float and decimal reads
    are exact.
    """

    def __init__(self, options: Optional[JsonDocumentOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            options: Optional JsonDocumentOptions
            logger: Optional logger instance
        """
        self.options = options or JsonDocumentOptions()
        self.logger = logger or logging.getLogger(__name__)

    def parse_document(self, json_text: Union[str, bytes, bytearray, memoryview]) -> JsonDocument:
        """
        Parse JSON text or UTF-8 bytes into a document.

        Args:
            json_text: JSON text to parse

        Returns:
            JsonDocument holding the root element

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            ValueError: If the text contains NaN or Infinity
            MaxDepthExceededError: If nesting exceeds options.max_depth
        """
        if isinstance(json_text, memoryview):
            json_text = json_text.tobytes()

        raw = json.loads(
            json_text,
            object_pairs_hook=self._build_object,
            parse_int=self._build_number,
            parse_float=self._build_number,
            parse_constant=self._reject_constant
        )
        root = self._to_element(raw)

        depth = self._calculate_nesting_depth(root)
        if depth > self.options.max_depth:
            raise MaxDepthExceededError(
                f"Document depth ({depth}) exceeds the maximum of {self.options.max_depth}",
                context={"depth": depth, "max_depth": self.options.max_depth}
            )

        self.logger.debug(f"Parsed JSON document with root kind: {root.value_kind.value}")
        return JsonDocument(root)

    def parse_element(self, json_text: Union[str, bytes, bytearray, memoryview]) -> JsonElement:
        """Parse JSON text and return its root element."""
        return self.parse_document(json_text).root_element

    def _build_object(self, pairs: List[Tuple[str, Any]]) -> JsonElement:
        return JsonElement(
            JsonValueKind.OBJECT,
            tuple(JsonProperty(name, self._to_element(value)) for name, value in pairs)
        )

    @staticmethod
    def _build_number(text: str) -> JsonElement:
        return JsonElement(JsonValueKind.NUMBER, text)

    @staticmethod
    def _reject_constant(name: str) -> None:
        raise ValueError(f"Invalid JSON number literal: {name}")

    def _to_element(self, value: Any) -> JsonElement:
        """Convert a value produced by json.loads hooks into a JsonElement."""
        if isinstance(value, JsonElement):
            return value
        if isinstance(value, str):
            return JsonElement(JsonValueKind.STRING, value)
        if value is True:
            return _TRUE
        if value is False:
            return _FALSE
        if value is None:
            return _NULL
        if isinstance(value, list):
            return JsonElement(JsonValueKind.ARRAY, tuple(self._to_element(item) for item in value))

        raise TypeError(f"Unexpected parsed value type: {type(value).__name__}")

    def _calculate_nesting_depth(self, element: JsonElement, current_depth: int = 0) -> int:
        """Calculate maximum container nesting depth of an element."""
        if element.value_kind is JsonValueKind.OBJECT:
            children = [prop.value for prop in element.payload]
        elif element.value_kind is JsonValueKind.ARRAY:
            children = element.payload
        else:
            return current_depth

        max_child_depth = current_depth + 1
        for child in children:
            max_child_depth = max(max_child_depth, self._calculate_nesting_depth(child, current_depth + 1))

        return max_child_depth
