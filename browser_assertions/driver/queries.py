"""
Query catalogue over a browser-use session.
Implements the driver queries assertion steps are built on, using the Playwright
page of the session's current tab.
"""

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from ..utils.visibility_utils import is_element_in_viewport
from .errors import (
    AmbiguousSelectorError,
    DriverError,
    ElementNotFoundError,
    SessionUnavailableError,
)

if TYPE_CHECKING:
    from browser_use.browser.session import BrowserSession

logger = logging.getLogger("browser_assertions.driver.queries")

OUTER_HTML_SCRIPT = "el => el.outerHTML"
CSS_PROPERTY_SCRIPT = "(el, name) => window.getComputedStyle(el).getPropertyValue(name)"
OPTION_SELECTED_SCRIPT = "el => el.selected === true"
SIZE_SCRIPT = """el => {
    const rect = el.getBoundingClientRect();
    return [Math.round(rect.width), Math.round(rect.height)];
}"""
POSITION_SCRIPT = """el => {
    const rect = el.getBoundingClientRect();
    return [Math.round(rect.left + window.scrollX), Math.round(rect.top + window.scrollY)];
}"""
VIEW_POSITION_SCRIPT = """el => {
    const rect = el.getBoundingClientRect();
    return [Math.round(rect.left), Math.round(rect.top)];
}"""

@contextmanager
def _driver_errors(action: str) -> Iterator[None]:
    """Translate Playwright errors raised by ``action`` into driver errors."""
    try:
        yield
    except PlaywrightError as e:
        logger.debug(f"{action} failed: {e}")
        raise DriverError(f"{action} failed: {e}") from e

def _pair(value: Any) -> Tuple[int, int]:
    first, second = value
    return int(first), int(second)

class BrowserQueries:
    """Driver queries against the current page of a browser session.

    Element specific queries require the selector to match exactly one element.
    ``count_elements`` and ``element_exists`` accept any number of matches.
    """

    def __init__(self, browser_session: 'BrowserSession', timeout_ms: Optional[int] = None):
        """Initialize queries for a browser session.

        Args:
            browser_session: Session exposing ``get_current_page()``
            timeout_ms: Playwright timeout for element operations, Playwright's default when None

        Raises:
            ValueError: If browser_session is None.
        """
        if browser_session is None:
            raise ValueError("Browser session cannot be None")
        self.browser_session = browser_session
        self.timeout_ms = timeout_ms

    async def _page(self) -> Page:
        with _driver_errors("Getting the current page"):
            page = await self.browser_session.get_current_page()
        if page is None:
            raise SessionUnavailableError("Browser session has no current page")
        if not isinstance(page, Page):
            raise SessionUnavailableError(
                f"Current page is a {type(page).__name__}, not a Playwright page; "
                f"browser-use releases before 0.6 are required"
            )
        return page

    async def _single(self, selector: str) -> Tuple[Page, Locator]:
        page = await self._page()
        locator = page.locator(selector)
        with _driver_errors(f"Counting elements for '{selector}'"):
            count = await locator.count()
        if count == 0:
            raise ElementNotFoundError(selector)
        if count > 1:
            raise AmbiguousSelectorError(selector, count)
        return page, locator

    async def _evaluate(self, selector: str, script: str, arg: Any = None) -> Any:
        _, locator = await self._single(selector)
        with _driver_errors(f"Evaluating script on '{selector}'"):
            return await locator.evaluate(script, arg, timeout=self.timeout_ms)

    async def _cookies(self) -> List[dict]:
        page = await self._page()
        with _driver_errors("Reading cookies"):
            if page.url.startswith(("http://", "https://")):
                return await page.context.cookies([page.url])
            return await page.context.cookies()

    async def get_cookie(self, name: str) -> Optional[str]:
        for cookie in await self._cookies():
            if cookie.get("name") == name:
                logger.debug(f"Found cookie '{name}'")
                return cookie.get("value")
        logger.debug(f"Cookie '{name}' not found")
        return None

    async def cookie_exists(self, name: str) -> bool:
        return await self.get_cookie(name) is not None

    async def cookie_not_exists(self, name: str) -> bool:
        return await self.get_cookie(name) is None

    async def get_url(self) -> str:
        page = await self._page()
        return page.url

    async def get_title(self) -> str:
        page = await self._page()
        with _driver_errors("Reading the page title"):
            return await page.title()

    async def get_page_html(self) -> str:
        page = await self._page()
        with _driver_errors("Reading the page HTML"):
            return await page.content()

    async def count_elements(self, selector: str) -> int:
        page = await self._page()
        with _driver_errors(f"Counting elements for '{selector}'"):
            count = await page.locator(selector).count()
        logger.debug(f"Selector '{selector}' matches {count} elements")
        return count

    async def get_attribute(self, selector: str, name: str) -> Optional[str]:
        _, locator = await self._single(selector)
        with _driver_errors(f"Reading attribute '{name}' of '{selector}'"):
            return await locator.get_attribute(name, timeout=self.timeout_ms)

    async def get_css_property(self, selector: str, name: str) -> Optional[str]:
        """Computed css value, None when the property has no value."""
        value = await self._evaluate(selector, CSS_PROPERTY_SCRIPT, name)
        if value is None or value == "":
            return None
        return value

    async def get_element_html(self, selector: str) -> str:
        return await self._evaluate(selector, OUTER_HTML_SCRIPT)

    async def get_text(self, selector: str) -> str:
        _, locator = await self._single(selector)
        with _driver_errors(f"Reading text of '{selector}'"):
            return await locator.inner_text(timeout=self.timeout_ms)

    async def get_value(self, selector: str) -> str:
        _, locator = await self._single(selector)
        with _driver_errors(f"Reading value of '{selector}'"):
            return await locator.input_value(timeout=self.timeout_ms)

    async def element_exists(self, selector: str) -> bool:
        return await self.count_elements(selector) > 0

    async def element_enabled(self, selector: str) -> bool:
        _, locator = await self._single(selector)
        with _driver_errors(f"Checking whether '{selector}' is enabled"):
            return await locator.is_enabled(timeout=self.timeout_ms)

    async def element_visible(self, selector: str) -> bool:
        _, locator = await self._single(selector)
        with _driver_errors(f"Checking visibility of '{selector}'"):
            return await locator.is_visible()

    async def element_visible_within_viewport(self, selector: str) -> bool:
        page, locator = await self._single(selector)
        with _driver_errors(f"Checking viewport visibility of '{selector}'"):
            if not await locator.is_visible():
                return False
            return await is_element_in_viewport(locator, page, timeout=self.timeout_ms)

    async def option_is_selected(self, selector: str) -> bool:
        return bool(await self._evaluate(selector, OPTION_SELECTED_SCRIPT))

    async def get_element_size(self, selector: str) -> Tuple[int, int]:
        return _pair(await self._evaluate(selector, SIZE_SCRIPT))

    async def get_element_position(self, selector: str) -> Tuple[int, int]:
        return _pair(await self._evaluate(selector, POSITION_SCRIPT))

    async def get_element_view_position(self, selector: str) -> Tuple[int, int]:
        return _pair(await self._evaluate(selector, VIEW_POSITION_SCRIPT))
