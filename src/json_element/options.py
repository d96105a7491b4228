"""Configuration options for writing, parsing and typed conversion."""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .types import InvalidArgumentError
from .utils.naming import JsonNamingPolicy


@dataclass(frozen=True)
class JsonWriterOptions:
    """
    Options controlling how a JsonWriter emits JSON text.

    Attributes:
        indented: Emit newlines and indentation between tokens
        indent_size: Number of spaces per nesting level when indented
        max_depth: Maximum container nesting allowed
        skip_validation: Skip structural checks (property names, balancing)
        ensure_ascii: Escape all non-ASCII characters in strings
    """

    indented: bool = False
    indent_size: int = 2
    max_depth: int = 1000
    skip_validation: bool = False
    ensure_ascii: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if self.indent_size < 0:
            raise InvalidArgumentError("indent_size must be non-negative")
        if self.max_depth <= 0:
            raise InvalidArgumentError("max_depth must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JsonWriterOptions':
        """Create options from a dictionary, ignoring unknown keys."""
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class JsonDocumentOptions:
    """Options controlling how JSON text is parsed into a JsonDocument."""

    max_depth: int = 64

    def __post_init__(self):
        if self.max_depth <= 0:
            raise InvalidArgumentError("max_depth must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JsonDocumentOptions':
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class JsonSerializerOptions:
    """
    Options controlling typed (de)serialization.

    Attributes:
        naming_policy: Transform applied to field names to get JSON property names
        property_name_case_insensitive: Match JSON property names ignoring case
        ignore_null_values: Skip null-valued properties on write and on read
        max_depth: Maximum nesting depth accepted during conversion
        write_indented: Produce indented text from serialize()
    """

    naming_policy: JsonNamingPolicy = JsonNamingPolicy.NONE
    property_name_case_insensitive: bool = False
    ignore_null_values: bool = False
    max_depth: int = 64
    write_indented: bool = False

    def __post_init__(self):
        """Validate options after initialization."""
        if not isinstance(self.naming_policy, JsonNamingPolicy):
            raise InvalidArgumentError(
                f"naming_policy must be a JsonNamingPolicy, got {type(self.naming_policy).__name__}"
            )
        if self.max_depth <= 0:
            raise InvalidArgumentError("max_depth must be positive")

    @classmethod
    def web(cls) -> 'JsonSerializerOptions':
        """Options matching common web API conventions (camelCase, case-insensitive reads)."""
        return cls(
            naming_policy=JsonNamingPolicy.CAMEL_CASE,
            property_name_case_insensitive=True
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a plain dictionary."""
        return {
            "naming_policy": self.naming_policy.value,
            "property_name_case_insensitive": self.property_name_case_insensitive,
            "ignore_null_values": self.ignore_null_values,
            "max_depth": self.max_depth,
            "write_indented": self.write_indented
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JsonSerializerOptions':
        """
        Create options from a dictionary.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            JsonSerializerOptions instance
        """
        try:
            naming_policy = JsonNamingPolicy(data.get("naming_policy", JsonNamingPolicy.NONE.value))
        except ValueError:
            raise InvalidArgumentError(f"Unknown naming policy: {data.get('naming_policy')!r}")

        return cls(
            naming_policy=naming_policy,
            property_name_case_insensitive=data.get("property_name_case_insensitive", False),
            ignore_null_values=data.get("ignore_null_values", False),
            max_depth=data.get("max_depth", 64),
            write_indented=data.get("write_indented", False)
        )
