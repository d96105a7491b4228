"""
JSON Element - helpers for immutable JSON trees.

Adds and removes properties on immutable JSON objects by rebuilding them,
and converts JSON elements into typed Python values.
"""

from .types import (
    JsonValueKind,
    ErrorType,
    JsonElementError,
    InvalidShapeError,
    InvalidArgumentError,
    JsonWriterStateError,
    MaxDepthExceededError,
)
from .options import JsonWriterOptions, JsonDocumentOptions, JsonSerializerOptions
from .utils import JsonNamingPolicy, get_properties
from .io import JsonWriter
from .models import JsonProperty, JsonElement, JsonDocument
from .parser import JsonParser
from .profiler import PerformanceProfiler, PerformanceMetrics
from .rebuilder import ObjectRebuilder
from .extensions import (
    rebuild_object,
    add_null_property,
    add_property,
    set_property,
    remove_property,
    remove_properties,
)
from .conversion import (
    JsonSerializer,
    convert_to_object,
    convert_document_to_object,
    serialize_to_element,
)

__version__ = "1.0.0"
__all__ = [
    "JsonValueKind",
    "ErrorType",
    "JsonElementError",
    "InvalidShapeError",
    "InvalidArgumentError",
    "JsonWriterStateError",
    "MaxDepthExceededError",
    "JsonWriterOptions",
    "JsonDocumentOptions",
    "JsonSerializerOptions",
    "JsonNamingPolicy",
    "get_properties",
    "JsonWriter",
    "JsonProperty",
    "JsonElement",
    "JsonDocument",
    "JsonParser",
    "PerformanceProfiler",
    "PerformanceMetrics",
    "ObjectRebuilder",
    "rebuild_object",
    "add_null_property",
    "add_property",
    "set_property",
    "remove_property",
    "remove_properties",
    "JsonSerializer",
    "convert_to_object",
    "convert_document_to_object",
    "serialize_to_element",
]
