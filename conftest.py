import pytest
from unittest.mock import AsyncMock, MagicMock

from browser_use import BrowserSession
from playwright.async_api import Locator, Page

from browser_assertions.driver.queries import BrowserQueries

@pytest.fixture
def mock_driver(mocker):
    """Create a mock driver with coroutine query methods."""
    return mocker.AsyncMock(spec=BrowserQueries)

@pytest.fixture
def mock_locator():
    """Create a mock Playwright locator matching a single element."""
    locator = MagicMock(spec=Locator)
    locator.count = AsyncMock(return_value=1)
    locator.get_attribute = AsyncMock()
    locator.inner_text = AsyncMock()
    locator.input_value = AsyncMock()
    locator.is_enabled = AsyncMock()
    locator.is_visible = AsyncMock()
    locator.evaluate = AsyncMock()
    locator.bounding_box = AsyncMock()
    return locator

@pytest.fixture
def mock_page(mock_locator):
    """Create a mock Playwright page whose locators resolve to mock_locator."""
    page = MagicMock(spec=Page)
    page.url = "https://example.com/login"
    page.title = AsyncMock(return_value="Example Domain")
    page.content = AsyncMock(return_value="<html><body></body></html>")
    page.locator = MagicMock(return_value=mock_locator)
    page.context = MagicMock()
    page.context.cookies = AsyncMock(return_value=[])
    page.viewport_size = {"width": 1280, "height": 720}
    return page

@pytest.fixture
def mock_browser_session(mock_page):
    """Create a mock browser session for testing."""
    session = MagicMock(spec=BrowserSession)
    session.get_current_page = AsyncMock(return_value=mock_page)
    return session
