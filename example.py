#!/usr/bin/env python3
"""
Example usage of JSON Element.

This script demonstrates adding and removing properties on immutable
JSON objects and converting elements into typed Python values.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from json_element import (
    JsonDocument,
    JsonProperty,
    JsonSerializerOptions,
    InvalidShapeError,
    convert_document_to_object,
    serialize_to_element,
)


@dataclass
class Profile:
    age: int
    city: str
    interests: List[str]


@dataclass
class User:
    user_name: str
    email: str
    profile: Profile
    nickname: Optional[str] = None


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO)

    print("JSON Element Example")
    print("=" * 50)

    document = JsonDocument.parse(
        '{"userName":"Alice Johnson","email":"alice@example.com",'
        '"profile":{"age":30,"city":"New York","interests":["reading","hiking"]},'
        '"internalId":"a1b2"}'
    )
    user = document.root_element
    print(f"Original: {user}")

    # Each call returns a new element; the source is left untouched
    updated = (
        user
        .remove_property("internalId")
        .add_property("verified", True)
        .add_property(JsonProperty("tags", ["admin", "dev"]))
        .add_null_property("nickname")
    )
    print(f"Updated:  {updated}")
    print(f"Source still has internalId: {user.try_get_property('internalId') is not None}")

    # Several edits in a single rebuild
    def mutate(writer, names_to_remove):
        writer.write_string("status", "active")
        writer.write_number("loginCount", 12)
        names_to_remove.extend(["email", "internalId"])

    print(f"Batched:  {user.mutate(mutate)}")

    # Typed conversion with web conventions (camelCase names)
    options = JsonSerializerOptions.web()
    typed = convert_document_to_object(document, User, options)
    print(f"\nTyped:    {typed}")

    round_trip = serialize_to_element(typed, options)
    print(f"Element:  {round_trip.to_json_string(indented=True)}")

    try:
        round_trip.get_property("profile").get_property("interests").add_property("x", 1)
    except InvalidShapeError as e:
        print(f"\nExpected error: {e}")


if __name__ == "__main__":
    main()
