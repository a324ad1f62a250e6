"""Browser session factory."""

from __future__ import annotations

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from .config import Settings, normalize_browser
from .utils.logging_utils import get_logger

logger = get_logger("driver")


def _chrome(headless: bool) -> WebDriver:
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    service = ChromeService(ChromeDriverManager().install())
    return webdriver.Chrome(service=service, options=options)


def _firefox(headless: bool) -> WebDriver:
    options = webdriver.FirefoxOptions()
    if headless:
        options.add_argument("--headless")
    service = FirefoxService(GeckoDriverManager().install())
    return webdriver.Firefox(service=service, options=options)


def _edge(headless: bool) -> WebDriver:
    options = webdriver.EdgeOptions()
    if headless:
        options.add_argument("--headless=new")
    service = EdgeService(EdgeChromiumDriverManager().install())
    return webdriver.Edge(service=service, options=options)


_LAUNCHERS = {
    "chrome": _chrome,
    "firefox": _firefox,
    "edge": _edge,
}


def create_driver(settings: Settings, browser: str | None = None) -> WebDriver:
    """Launch a browser session configured from *settings*.

    The browser name is validated before anything is launched; an
    unsupported name raises ``ConfigurationError``.
    """
    name = normalize_browser(browser or settings.browser)
    logger.info("Initializing browser: %s (headless=%s)", name, settings.headless)

    driver = _LAUNCHERS[name](settings.headless)
    try:
        driver.delete_all_cookies()
        if not settings.headless:
            driver.maximize_window()
        driver.implicitly_wait(settings.implicit_wait)
    except Exception:
        driver.quit()
        raise
    logger.debug("Browser ready, implicit wait %ss", settings.implicit_wait)
    return driver


def reset_session(driver: WebDriver) -> None:
    """Clear cookies and web storage so the next test starts signed out."""
    driver.delete_all_cookies()
    try:
        driver.execute_script("window.localStorage.clear(); window.sessionStorage.clear();")
    except WebDriverException as exc:
        # about:blank and data: URLs deny storage access.
        logger.debug("Could not clear web storage: %s", exc)
