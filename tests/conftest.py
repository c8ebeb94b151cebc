"""Pytest configuration and fixtures for valtree tests."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from valtree.config import get_settings


@dataclass
class User:
    name: str = ""
    age: int = 0
    email: str = ""
    tags: list[str] = field(default_factory=list)
    settings: dict[str, int] = field(default_factory=dict)
    password: str = ""


@dataclass
class Address:
    street: str = ""
    city: str = ""


@dataclass
class Company:
    name: str = ""
    address: Address = field(default_factory=Address)


@dataclass
class Employee:
    name: str = ""
    company: Company = field(default_factory=Company)
    started: datetime | None = None


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild cached settings around each test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_user():
    """A user that passes the standard user validator."""
    return User(
        name="Ada",
        age=36,
        email="ada@example.com",
        tags=["admin", "ops"],
        settings={"theme": 1},
    )


@pytest.fixture
def invalid_user():
    """A user failing several field rules at once."""
    return User(
        name="",
        age=15,
        email="not-an-email",
        tags=["ok", ""],
        settings={"a": 1, "b": 2, "c": 3},
    )


@pytest.fixture
def employee():
    """Employee whose company address has an empty street."""
    return Employee(
        name="Grace",
        company=Company(name="Navy", address=Address(street="", city="Arlington")),
    )
