"""Core type definitions for JSON element handling."""

from enum import Enum
from typing import Any, Optional


class JsonValueKind(Enum):
    """Enumeration of JSON value kinds."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


class ErrorType(Enum):
    """Enumeration of error types."""
    SHAPE = "shape"
    ARGUMENT = "argument"
    WRITER_STATE = "writer_state"
    DEPTH = "depth"


class JsonElementError(Exception):
    """Base exception for JSON element errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InvalidShapeError(JsonElementError):
    """Raised when an operation is applied to the wrong kind of JSON value."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.SHAPE, context)


class InvalidArgumentError(JsonElementError, ValueError):
    """Raised when a required argument is missing or invalid."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.ARGUMENT, context)


class JsonWriterStateError(JsonElementError):
    """Raised when a write would produce structurally invalid JSON."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.WRITER_STATE, context)


class MaxDepthExceededError(JsonElementError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.DEPTH, context)
