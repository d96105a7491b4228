"""JSON output for element handling."""

from .json_writer import JsonWriter

__all__ = ["JsonWriter"]
