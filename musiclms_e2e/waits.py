"""Explicit-wait primitives built on ``WebDriverWait``."""

from __future__ import annotations

import time
from typing import Any, Callable

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .errors import WaitTimeoutError
from .locators import Locator
from .utils.logging_utils import get_logger

logger = get_logger("waits")

DEFAULT_TIMEOUT = 15.0
DEFAULT_POLL_FREQUENCY = 0.5


class Waiter:
    """Polls a condition at a fixed interval until it holds or time runs out.

    Every condition re-resolves its locator against the live DOM on each
    poll, so a page that re-rendered between polls is picked up.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: float = DEFAULT_TIMEOUT,
        poll_frequency: float = DEFAULT_POLL_FREQUENCY,
    ) -> None:
        self.driver = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency

    def until(
        self,
        condition: Callable[[WebDriver], Any],
        description: str,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Wait until *condition* returns a truthy value and return it.

        Raises
        ------
        WaitTimeoutError
            When the condition is still falsy after *timeout* seconds.
        """
        budget = self.timeout if timeout is None else timeout
        started = time.monotonic()
        wait = WebDriverWait(self.driver, budget, poll_frequency=self.poll_frequency)
        try:
            return wait.until(condition)
        except TimeoutException as exc:
            elapsed = time.monotonic() - started
            logger.debug("Wait for %s timed out after %.1fs", description, elapsed)
            raise WaitTimeoutError(description, budget, elapsed) from exc

    def until_visible(self, locator: Locator, *, timeout: float | None = None) -> WebElement:
        return self.until(
            EC.visibility_of_element_located(tuple(locator)),
            f"visibility of {locator}",
            timeout=timeout,
        )

    def until_clickable(self, locator: Locator, *, timeout: float | None = None) -> WebElement:
        return self.until(
            EC.element_to_be_clickable(tuple(locator)),
            f"clickability of {locator}",
            timeout=timeout,
        )

    def until_url_contains(self, fragment: str, *, timeout: float | None = None) -> bool:
        return self.until(
            EC.url_contains(fragment),
            f"URL containing {fragment!r}",
            timeout=timeout,
        )
