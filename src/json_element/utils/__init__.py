"""Utility functions for JSON element handling."""

from .naming import JsonNamingPolicy, convert_name
from .properties import get_properties

__all__ = ["JsonNamingPolicy", "convert_name", "get_properties"]
