"""Property naming policies for typed conversion."""

from enum import Enum

from pydantic.alias_generators import to_camel, to_pascal, to_snake


class JsonNamingPolicy(Enum):
    """Enumeration of supported property naming policies."""
    NONE = "none"
    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE_LOWER = "snake_case_lower"
    SNAKE_CASE_UPPER = "SNAKE_CASE_UPPER"
    KEBAB_CASE_LOWER = "kebab-case-lower"
    KEBAB_CASE_UPPER = "KEBAB-CASE-UPPER"


def convert_name(name: str, policy: JsonNamingPolicy) -> str:
    """
    Convert a field name to its JSON property name under a naming policy.

    Args:
        name: Field name, usually snake_case
        policy: Naming policy to apply

    Returns:
        The JSON property name
    """
    if policy is JsonNamingPolicy.NONE:
        return name
    if policy is JsonNamingPolicy.CAMEL_CASE:
        return to_camel(name)
    if policy is JsonNamingPolicy.PASCAL_CASE:
        return to_pascal(name)

    snake = to_snake(name)
    if policy is JsonNamingPolicy.SNAKE_CASE_LOWER:
        return snake
    if policy is JsonNamingPolicy.SNAKE_CASE_UPPER:
        return snake.upper()
    if policy is JsonNamingPolicy.KEBAB_CASE_LOWER:
        return snake.replace("_", "-")
    if policy is JsonNamingPolicy.KEBAB_CASE_UPPER:
        return snake.replace("_", "-").upper()

    raise ValueError(f"Unsupported naming policy: {policy}")
