"""Pytest configuration and fixtures."""

import pytest
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from json_element import JsonDocument


def parse(json_text):
    """Parse JSON text and return its root element."""
    return JsonDocument.parse(json_text).root_element


@dataclass
class Address:
    street: str
    city: str
    postal_code: str


@dataclass
class Person:
    id: UUID
    name: str
    display_name: str
    age: int
    active: bool
    score: float
    tags: List[str]
    address: Address
    created: datetime
    nickname: Optional[str] = None
    role: str = "member"


@pytest.fixture
def sample_object():
    """Sample flat JSON object."""
    return parse('{"a":1,"b":2,"c":3}')


@pytest.fixture
def sample_nested_object():
    """Sample JSON object with nested content."""
    return parse(
        '{"id":7,"user":{"name":"Alice","roles":["admin","dev"]},'
        '"settings":{"theme":"dark","notifications":true},"note":null}'
    )


@pytest.fixture
def sample_person():
    """Sample typed record for conversion tests."""
    return Person(
        id=UUID("12345678-1234-5678-1234-567812345678"),
        name="Alice",
        display_name="Alice J.",
        age=30,
        active=True,
        score=4.5,
        tags=["reading", "hiking"],
        address=Address(street="1 Main St", city="New York", postal_code="10001"),
        created=datetime(2024, 1, 2, 3, 4, 5),
    )
