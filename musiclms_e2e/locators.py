"""Immutable element locators shared by all page objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from selenium.webdriver.common.by import By


def _xpath_literal(text: str) -> str:
    """Quote *text* for use inside an XPath expression."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass(frozen=True)
class Locator:
    """A single UI element identified by a Selenium strategy and value.

    Iterating a locator yields ``(by, value)`` so it can be passed straight to
    ``driver.find_element(*locator)`` or to an expected condition.
    """

    by: str
    value: str
    name: str = field(default="", compare=False)

    def __iter__(self) -> Iterator[str]:
        yield self.by
        yield self.value

    def __str__(self) -> str:
        label = self.name or "element"
        return f"{label} ({self.by}={self.value!r})"

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def by_id(cls, value: str, name: str = "") -> "Locator":
        return cls(By.ID, value, name or value)

    @classmethod
    def by_name(cls, value: str, name: str = "") -> "Locator":
        return cls(By.NAME, value, name or value)

    @classmethod
    def css(cls, value: str, name: str = "") -> "Locator":
        return cls(By.CSS_SELECTOR, value, name)

    @classmethod
    def xpath(cls, value: str, name: str = "") -> "Locator":
        return cls(By.XPATH, value, name)

    @classmethod
    def link_text(cls, value: str, name: str = "") -> "Locator":
        return cls(By.LINK_TEXT, value, name or value)

    @classmethod
    def text(cls, text: str, tag: str = "*", name: str = "") -> "Locator":
        """Element of type *tag* whose text contains *text*."""
        return cls(
            By.XPATH,
            f"//{tag}[contains(normalize-space(.), {_xpath_literal(text)})]",
            name or text,
        )

    @classmethod
    def option(cls, text: str) -> "Locator":
        """Option of an open custom dropdown, matched by visible text."""
        return cls(
            By.XPATH,
            f"//*[@role='option'][contains(normalize-space(.), {_xpath_literal(text)})]",
            f"option '{text}'",
        )
