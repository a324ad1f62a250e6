"""Named parameter sets for data-driven tests.

File-backed sets are read from ``<data_dir>/<stem>.xlsx`` when present and
``<data_dir>/<stem>.csv`` otherwise.  Inline sets carry typed values
(``bool`` flags) directly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Sequence

import pytest

from ..errors import DataSourceError
from ..utils.logging_utils import get_logger
from .excel_utility import read_rows

logger = get_logger("data.providers")

DEFAULT_DATA_DIR = Path(os.environ.get("MUSICLMS_DATA_DIR", "test_data"))

# name -> (file stem, sheet name)
FILE_SETS: dict[str, tuple[str, str]] = {
    "LoginData": ("LoginTestData", "LoginData"),
    "SignupData": ("SignupTestData", "SignupData"),
    "InvalidLoginData": ("InvalidLoginData", "InvalidData"),
}

INLINE_SETS: dict[str, list[tuple[Any, ...]]] = {
    "ValidCredentials": [
        ("teacher@musiclms.test", "SecurePass123!", "Test Teacher", "teacher"),
        ("student@musiclms.test", "SecurePass456!", "Test Student", "student"),
    ],
    "PasswordValidation": [
        ("12345", False, "Too short (less than 6 chars)"),
        ("123456", True, "Minimum length (6 chars)"),
        ("password", True, "Valid length, no special chars"),
        ("P@ssw0rd!", True, "Strong password"),
        ("", False, "Empty password"),
        ("   ", False, "Whitespace only"),
    ],
    "EmailValidation": [
        ("user@domain.com", True, "Valid email"),
        ("user.name@domain.com", True, "Email with dot in local part"),
        ("user@sub.domain.com", True, "Email with subdomain"),
        ("invalid-email", False, "Missing @ and domain"),
        ("@domain.com", False, "Missing local part"),
        ("user@", False, "Missing domain"),
        ("", False, "Empty email"),
        ("user@domain", False, "Missing TLD"),
    ],
    "StudentInviteData": [
        ("Alice Johnson", "alice@test.com", "Pass123!", "Piano", "Beginner", True),
        ("Bob Williams", "bob@test.com", "Pass456!", "Guitar", "Intermediate", True),
        ("Carol Davis", "carol@test.com", "Pass789!", "Violin", "Advanced", True),
    ],
}


class DataProviders:
    """Resolve a parameter set name to its ordered rows."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR

    @property
    def names(self) -> list[str]:
        return sorted([*FILE_SETS, *INLINE_SETS])

    def _data_file(self, stem: str) -> Path:
        for suffix in (".xlsx", ".csv"):
            candidate = self.data_dir / f"{stem}{suffix}"
            if candidate.is_file():
                return candidate
        raise DataSourceError(f"No data file for '{stem}' in {self.data_dir}")

    def get(self, name: str) -> list[tuple[Any, ...]]:
        if name in INLINE_SETS:
            return list(INLINE_SETS[name])
        if name not in FILE_SETS:
            raise DataSourceError(f"Unknown data set: {name}")

        stem, sheet = FILE_SETS[name]
        path = self._data_file(stem)
        rows = read_rows(path, sheet if path.suffix == ".xlsx" else None)
        logger.info("Data set %s: %d rows from %s", name, len(rows), path)
        return rows


def data_provider(name: str, argnames: str | Sequence[str], data_dir: str | Path | None = None):
    """Parametrize a test with the rows of data set *name*.

    An unreadable data set skips only the decorated test.
    """
    names = [arg.strip() for arg in argnames.split(",")] if isinstance(argnames, str) else list(argnames)
    try:
        rows = DataProviders(data_dir).get(name)
        _check_width(name, rows, names)
    except DataSourceError as exc:
        logger.error("Data set %s unavailable: %s", name, exc)
        placeholder = pytest.param(*([None] * len(names)), marks=pytest.mark.skip(reason=str(exc)))
        return pytest.mark.parametrize(names, [placeholder], ids=[f"{name}-unavailable"])
    ids = [f"{name}-{index + 1}" for index in range(len(rows))]
    return pytest.mark.parametrize(names, rows, ids=ids)


def _check_width(name: str, rows: Sequence[tuple[Any, ...]], names: Sequence[str]) -> None:
    for index, row in enumerate(rows):
        if len(row) != len(names):
            raise DataSourceError(
                f"Data set {name} row {index + 1} has {len(row)} columns, expected {len(names)} ({', '.join(names)})"
            )
