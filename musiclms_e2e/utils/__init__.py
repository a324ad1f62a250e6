"""Utility helpers for logging and generated test identities."""

from .logging_utils import configure_logging, get_logger
from .random_data import (
    random_alphanumeric,
    random_email,
    random_full_name,
    random_number,
    random_string,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "random_alphanumeric",
    "random_email",
    "random_full_name",
    "random_number",
    "random_string",
]
