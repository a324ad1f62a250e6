"""Generated-unique identities for tests that create server-side state."""

from __future__ import annotations

import string

from faker import Faker

_faker = Faker()

EMAIL_DOMAIN = "musiclms.test"


def random_string(length: int = 5) -> str:
    return _faker.lexify("?" * length, letters=string.ascii_letters)


def random_number(length: int = 5) -> str:
    return _faker.numerify("#" * length)


def random_alphanumeric() -> str:
    """Three upper-case letters followed by three digits, e.g. ``QZT482``."""
    return random_string(3).upper() + random_number(3)


def random_email(prefix: str = "test") -> str:
    return f"{prefix}_{random_alphanumeric()}@{EMAIL_DOMAIN}".lower()


def random_full_name(prefix: str = "Test") -> str:
    return f"{prefix} {_faker.first_name()} {random_string(3)}"
