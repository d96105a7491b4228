"""JSON document model."""

from dataclasses import dataclass
from typing import Optional, Union

from ..io.json_writer import JsonWriter
from ..options import JsonDocumentOptions
from .json_element import JsonElement


@dataclass(frozen=True)
class JsonDocument:
    """A parsed JSON document holding its root element."""

    root_element: JsonElement

    @classmethod
    def parse(cls, json_text: Union[str, bytes, bytearray, memoryview],
              options: Optional[JsonDocumentOptions] = None) -> 'JsonDocument':
        """
        Parse JSON text or UTF-8 bytes into a document.

        Args:
            json_text: JSON text, or UTF-8 encoded bytes
            options: Optional JsonDocumentOptions

        Returns:
            JsonDocument instance
        """
        from ..parser import JsonParser
        return JsonParser(options).parse_document(json_text)

    def write_to(self, writer: JsonWriter) -> None:
        """Write the root element to a JsonWriter."""
        self.root_element.write_to(writer)
