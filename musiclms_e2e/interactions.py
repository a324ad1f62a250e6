"""Safe interaction toolkit shared by every page object.

Page objects receive an ``Interactions`` instance rather than inheriting
from a base page.  Actions (``click``, ``type``, ``select_custom_option``)
wait first and fail fast with ``InteractionError``; probes (``is_displayed``,
``is_enabled``, ``wait_for_url_contains``) return ``False`` instead of
raising when an element is absent.
"""

from __future__ import annotations

from typing import Callable, Sequence

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    NoSuchElementException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver

from .errors import InteractionError, WaitTimeoutError
from .locators import Locator
from .utils.logging_utils import get_logger
from .waits import Waiter

logger = get_logger("interactions")

_TRANSIENT_ERRORS = (
    StaleElementReferenceException,
    ElementClickInterceptedException,
    ElementNotInteractableException,
)

_LOOKUP_ERRORS = (WaitTimeoutError, NoSuchElementException, StaleElementReferenceException)


class Interactions:
    """Wait-backed actions and boolean probes over one browser session."""

    def __init__(self, driver: WebDriver, waiter: Waiter | None = None) -> None:
        self.driver = driver
        self.waiter = waiter or Waiter(driver)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def open(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.driver.get(url)

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def title(self) -> str:
        return self.driver.title

    def wait_for_url_contains(self, fragment: str, *, timeout: float | None = None) -> bool:
        """Block until the URL contains *fragment*; ``False`` on timeout."""
        try:
            return bool(self.waiter.until_url_contains(fragment, timeout=timeout))
        except WaitTimeoutError:
            logger.info("URL never contained %r (current: %s)", fragment, self.current_url)
            return False

    def wait_for_any(
        self,
        probes: Sequence[Callable[[], bool]],
        description: str,
        *,
        timeout: float | None = None,
    ) -> bool:
        """Block until any probe returns ``True``; ``False`` on timeout."""
        try:
            self.waiter.until(lambda _driver: any(probe() for probe in probes), description, timeout=timeout)
            return True
        except WaitTimeoutError:
            return False

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def click(self, locator: Locator) -> None:
        """Wait for *locator* to be clickable, then click it."""
        try:
            self.waiter.until_clickable(locator).click()
        except WaitTimeoutError as exc:
            raise InteractionError("click", str(locator), str(exc)) from exc
        except _TRANSIENT_ERRORS as exc:
            raise InteractionError("click", str(locator), type(exc).__name__) from exc
        logger.debug("Clicked %s", locator)

    def type(self, locator: Locator, text: str) -> None:
        """Wait for *locator* to be visible, clear it and enter *text*."""
        try:
            element = self.waiter.until_visible(locator)
            element.clear()
            element.send_keys(text)
        except WaitTimeoutError as exc:
            raise InteractionError("type into", str(locator), str(exc)) from exc
        except _TRANSIENT_ERRORS as exc:
            raise InteractionError("type into", str(locator), type(exc).__name__) from exc
        logger.debug("Typed %d characters into %s", len(text), locator)

    def select_custom_option(self, trigger: Locator, option_text: str) -> None:
        """Open a non-native dropdown and pick the option showing *option_text*.

        The option list renders asynchronously after the trigger is clicked,
        so the option is waited for rather than looked up directly.
        """
        self.click(trigger)
        self.click(Locator.option(option_text))
        logger.debug("Selected %r from %s", option_text, trigger)

    def check_by_label(self, label_text: str) -> None:
        """Tick the checkbox whose ``<label>`` shows *label_text*."""
        label = Locator.text(label_text, tag="label", name=f"checkbox label '{label_text}'")
        self.click(label)

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------

    def is_displayed(self, locator: Locator, *, timeout: float | None = 0) -> bool:
        """Return whether *locator* is visible, waiting up to *timeout* seconds.

        The default of ``0`` checks the current DOM once; pass ``None`` to use
        the waiter's full budget.
        """
        try:
            if timeout == 0:
                return self.driver.find_element(*locator).is_displayed()
            self.waiter.until_visible(locator, timeout=timeout)
            return True
        except _LOOKUP_ERRORS:
            return False

    def is_enabled(self, locator: Locator) -> bool:
        try:
            return self.driver.find_element(*locator).is_enabled()
        except _LOOKUP_ERRORS:
            return False

    def value_of(self, locator: Locator) -> str:
        """Current ``value`` property of an input, or ``""`` when absent."""
        try:
            return self.driver.find_element(*locator).get_attribute("value") or ""
        except _LOOKUP_ERRORS:
            return ""

    def text_of(self, locator: Locator, *, timeout: float | None = 0) -> str:
        try:
            if timeout == 0:
                return self.driver.find_element(*locator).text
            return self.waiter.until_visible(locator, timeout=timeout).text
        except _LOOKUP_ERRORS:
            return ""

    def check_validity(self, locator: Locator) -> bool:
        """Evaluate HTML5 ``checkValidity()`` on the element."""
        try:
            element = self.driver.find_element(*locator)
            return bool(self.driver.execute_script("return arguments[0].checkValidity();", element))
        except _LOOKUP_ERRORS:
            return False
        except WebDriverException as exc:
            logger.warning("checkValidity failed for %s: %s", locator, exc)
            return False
