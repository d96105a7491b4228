"""Enumeration of readable properties on arbitrary Python objects."""

import dataclasses
from collections.abc import Mapping
from typing import Any, List, Tuple


def get_properties(source: Any) -> List[Tuple[str, Any]]:
    """
    Return the (name, value) pairs of an object's public readable properties.

    Mappings yield their entries. Dataclass instances yield their fields in
    declaration order. Other objects yield their public instance attributes
    followed by the public ``property`` getters declared on their class.

    Args:
        source: Object to enumerate

    Returns:
        List of (name, value) tuples
    """
    if isinstance(source, Mapping):
        return [(str(key), value) for key, value in source.items()]

    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return [(field.name, getattr(source, field.name)) for field in dataclasses.fields(source)]

    properties = [
        (name, value)
        for name, value in getattr(source, "__dict__", {}).items()
        if not name.startswith("_")
    ]

    seen = {name for name, _ in properties}
    for klass in reversed(type(source).__mro__):
        for name, attribute in vars(klass).items():
            if name.startswith("_") or name in seen:
                continue
            if isinstance(attribute, property) and attribute.fget is not None:
                seen.add(name)
                properties.append((name, getattr(source, name)))

    return properties
