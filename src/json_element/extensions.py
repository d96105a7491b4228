"""
Module-level helpers for adding and removing properties on JSON objects.

Each call rebuilds the whole object, so when several changes are needed use
rebuild_object() to make them all in one pass.
"""

from typing import Any, Iterable, Optional

from .models import JsonElement
from .rebuilder import MutateCallback, ObjectRebuilder, MISSING

_default_rebuilder = ObjectRebuilder()


def get_rebuilder() -> ObjectRebuilder:
    """Get the default rebuilder used by the module-level helpers."""
    return _default_rebuilder


def rebuild_object(element: JsonElement, mutate: Optional[MutateCallback] = None) -> JsonElement:
    """Rebuild an object, letting a callback add and remove properties."""
    return _default_rebuilder.rebuild(element, mutate)


def add_null_property(element: JsonElement, name: str) -> JsonElement:
    return _default_rebuilder.add_null_property(element, name)


def add_property(element: JsonElement, name_or_property: Any, value: Any = MISSING) -> JsonElement:
    """
    Return a copy of element with one property added.

    Accepts either a JsonProperty to copy, or a name and a value (scalar,
    list/tuple, JsonElement, or a record whose properties become a nested
    object).
    """
    return _default_rebuilder.add_property(element, name_or_property, value)


def set_property(element: JsonElement, name: str, value: Any) -> JsonElement:
    return _default_rebuilder.set_property(element, name, value)


def remove_property(element: JsonElement, name: str) -> JsonElement:
    return _default_rebuilder.remove_property(element, name)


def remove_properties(element: JsonElement, names: Iterable[str]) -> JsonElement:
    return _default_rebuilder.remove_properties(element, names)
