"""Forward-only JSON writer over a binary stream."""

import io
import json
import logging
import math
from decimal import Decimal
from typing import BinaryIO, List, Optional, Union

from ..options import JsonWriterOptions
from ..types import JsonWriterStateError, MaxDepthExceededError


_OBJECT = "object"
_ARRAY = "array"


class _Container:
    """Bookkeeping for one open object or array."""

    __slots__ = ("kind", "count", "pending_name")

    def __init__(self, kind: str):
        self.kind = kind
        self.count = 0
        self.pending_name = False


class JsonWriter:
    """
    Writes JSON text token by token into a binary stream.

    Structural checks make sure every value inside an object is preceded by a
    property name, containers are closed in order and at most one root value
    is written. Output is buffered until flush() or close(); using the writer
    as a context manager flushes and closes it on exit.
    """

    def __init__(self, stream: Optional[BinaryIO] = None,
                 options: Optional[JsonWriterOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the writer.

        Args:
            stream: Binary stream receiving UTF-8 output (defaults to io.BytesIO)
            options: Optional JsonWriterOptions
            logger: Optional logger instance
        """
        self.stream = stream if stream is not None else io.BytesIO()
        self.options = options or JsonWriterOptions()
        self.logger = logger or logging.getLogger(__name__)

        self._pending: List[str] = []
        self._pending_size = 0
        self._committed = 0
        self._stack: List[_Container] = []
        self._root_written = False
        self._closed = False

    def __enter__(self) -> 'JsonWriter':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def current_depth(self) -> int:
        """Number of containers currently open."""
        return len(self._stack)

    @property
    def bytes_pending(self) -> int:
        """Bytes written but not yet flushed to the stream."""
        return self._pending_size

    @property
    def bytes_committed(self) -> int:
        """Bytes flushed to the stream so far."""
        return self._committed

    # Containers

    def write_start_object(self, name: Optional[str] = None) -> None:
        """Write '{', optionally preceded by a property name."""
        self._start_container(_OBJECT, "{", name)

    def write_end_object(self) -> None:
        """Write '}' closing the innermost object."""
        self._end_container(_OBJECT, "}")

    def write_start_array(self, name: Optional[str] = None) -> None:
        """Write '[', optionally preceded by a property name."""
        self._start_container(_ARRAY, "[", name)

    def write_end_array(self) -> None:
        """Write ']' closing the innermost array."""
        self._end_container(_ARRAY, "]")

    # Property names and values

    def write_property_name(self, name: str) -> None:
        """
        Write a property name inside the current object.

        Raises:
            JsonWriterStateError: If not positioned to write a property name
        """
        self._check_open()
        if not isinstance(name, str):
            raise TypeError(f"Property name must be str, got {type(name).__name__}")

        top = self._stack[-1] if self._stack else None
        if not self.options.skip_validation:
            if top is None or top.kind != _OBJECT:
                raise JsonWriterStateError("Cannot write a property name outside of an object")
            if top.pending_name:
                raise JsonWriterStateError(
                    "Cannot write a property name directly after another property name",
                    context={"name": name}
                )

        if top is not None:
            self._write_separator(top)
            top.count += 1
            top.pending_name = True

        separator = ": " if self.options.indented else ":"
        self._emit(self._encode_string(name) + separator)

    def write_string_value(self, value: str) -> None:
        """Write a JSON string value."""
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        self._write_value(self._encode_string(value))

    def write_number_value(self, value: Union[int, float, Decimal]) -> None:
        """
        Write a JSON number value.

        Raises:
            ValueError: If value is NaN or infinite
            TypeError: If value is not a number
        """
        self._write_value(self._format_number(value))

    def write_boolean_value(self, value: bool) -> None:
        """Write true or false."""
        self._write_value("true" if value else "false")

    def write_null_value(self) -> None:
        """Write null."""
        self._write_value("null")

    def write_string(self, name: str, value: str) -> None:
        self.write_property_name(name)
        self.write_string_value(value)

    def write_number(self, name: str, value: Union[int, float, Decimal]) -> None:
        self.write_property_name(name)
        self.write_number_value(value)

    def write_boolean(self, name: str, value: bool) -> None:
        self.write_property_name(name)
        self.write_boolean_value(value)

    def write_null(self, name: str) -> None:
        self.write_property_name(name)
        self.write_null_value()

    def write_raw_number(self, raw: str) -> None:
        """Write a number from text that is already valid JSON number syntax."""
        self._write_value(raw)

    # Lifecycle

    def flush(self) -> None:
        """Encode buffered text and write it to the stream."""
        if not self._pending:
            return
        data = "".join(self._pending).encode("utf-8")
        self.stream.write(data)
        self._committed += len(data)
        self._pending = []
        self._pending_size = 0

    def close(self) -> None:
        """Flush remaining output; further writes raise JsonWriterStateError."""
        if self._closed:
            return
        self.flush()
        self._closed = True
        if self._stack:
            self.logger.debug(f"JsonWriter closed with {len(self._stack)} unclosed container(s)")

    # Internals

    def _start_container(self, kind: str, token: str, name: Optional[str]) -> None:
        if name is not None:
            self.write_property_name(name)

        if len(self._stack) >= self.options.max_depth:
            raise MaxDepthExceededError(
                f"Writer depth would exceed the maximum of {self.options.max_depth}",
                context={"max_depth": self.options.max_depth}
            )

        self._write_value(token, completes_root=False)
        self._stack.append(_Container(kind))

    def _end_container(self, kind: str, token: str) -> None:
        self._check_open()
        if not self._stack:
            if not self.options.skip_validation:
                raise JsonWriterStateError(f"Cannot end {kind}: no container is open")
            self._emit(token)
            return

        top = self._stack[-1]
        if not self.options.skip_validation:
            if top.kind != kind:
                raise JsonWriterStateError(f"Cannot end {kind} while inside an {top.kind}")
            if top.pending_name:
                raise JsonWriterStateError(f"Cannot end {kind} after a property name without a value")

        self._stack.pop()
        if self.options.indented and top.count:
            self._emit(self._newline(len(self._stack)))
        self._emit(token)

        if not self._stack:
            self._root_written = True

    def _write_value(self, text: str, completes_root: bool = True) -> None:
        self._check_open()
        top = self._stack[-1] if self._stack else None

        if not self.options.skip_validation:
            if top is None and self._root_written:
                raise JsonWriterStateError("Cannot write more than one root value")
            if top is not None and top.kind == _OBJECT and not top.pending_name:
                raise JsonWriterStateError("A property name must be written before a value inside an object")

        if top is not None:
            if top.kind == _ARRAY:
                self._write_separator(top)
                top.count += 1
            top.pending_name = False
        elif completes_root:
            self._root_written = True

        self._emit(text)

    def _write_separator(self, top: _Container) -> None:
        if top.count:
            self._emit(",")
        if self.options.indented:
            self._emit(self._newline(len(self._stack)))

    def _newline(self, depth: int) -> str:
        return "\n" + " " * (self.options.indent_size * depth)

    def _emit(self, text: str) -> None:
        self._pending.append(text)
        self._pending_size += len(text.encode("utf-8")) if not text.isascii() else len(text)

    def _check_open(self) -> None:
        if self._closed:
            raise JsonWriterStateError("Cannot write to a closed JsonWriter")

    def _encode_string(self, value: str) -> str:
        return json.dumps(value, ensure_ascii=self.options.ensure_ascii)

    @staticmethod
    def _format_number(value: Union[int, float, Decimal]) -> str:
        if isinstance(value, bool):
            raise TypeError("Cannot write a bool as a JSON number")
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"JSON does not support non-finite numbers: {value!r}")
            return float.__repr__(value)
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"JSON does not support non-finite numbers: {value!r}")
            return str(value)
        raise TypeError(f"Expected int, float or Decimal, got {type(value).__name__}")
