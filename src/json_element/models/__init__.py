"""Data models for JSON elements."""

from .json_property import JsonProperty
from .json_element import JsonElement
from .json_document import JsonDocument

__all__ = ["JsonProperty", "JsonElement", "JsonDocument"]
