"""JSON object property model."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..io.json_writer import JsonWriter
    from .json_element import JsonElement


@dataclass(frozen=True)
class JsonProperty:
    """A single named member of a JSON object."""

    name: str
    value: 'JsonElement'

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")

    def name_equals(self, text: str) -> bool:
        """Check whether the property name equals the given text (ordinal comparison)."""
        return self.name == text

    def write_to(self, writer: 'JsonWriter') -> None:
        """Write the property name and its value to a JsonWriter."""
        writer.write_property_name(self.name)
        self.value.write_to(writer)

    def __str__(self) -> str:
        from ..io.json_writer import JsonWriter

        with JsonWriter() as writer:
            writer.write_start_object()
            self.write_to(writer)
            writer.write_end_object()
        return writer.stream.getvalue().decode("utf-8")[1:-1]
