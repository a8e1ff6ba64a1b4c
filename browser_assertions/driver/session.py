"""
Browser session helpers.
Creates a browser-use session from settings and binds driver queries to it.
"""

import logging
from typing import Optional

from browser_use import BrowserProfile, BrowserSession

from ..config import Settings
from .queries import BrowserQueries

logger = logging.getLogger("browser_assertions.driver.session")

def create_browser_session(settings: Optional[Settings] = None) -> BrowserSession:
    """Create a browser-use session configured from settings.

    The session is not started; callers own ``start()`` and ``stop()``.

    Args:
        settings: Settings to use, loaded from the environment when None

    Returns:
        BrowserSession: Unstarted browser session
    """
    if settings is None:
        settings = Settings.from_env()
    logger.debug(f"Creating browser session (headless={settings.headless})")
    return BrowserSession(
        browser_profile=BrowserProfile(
            headless=settings.headless,
        )
    )

def open_queries(browser_session: BrowserSession, settings: Optional[Settings] = None) -> BrowserQueries:
    """Bind driver queries to a browser session using the configured timeout."""
    if settings is None:
        settings = Settings.from_env()
    return BrowserQueries(browser_session, timeout_ms=settings.timeout_ms)
