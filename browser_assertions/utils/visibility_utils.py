"""
Utility functions for checking element visibility.
"""

from typing import Optional

from playwright.async_api import Locator, Page

async def is_element_in_viewport(locator: Locator, page: Page, timeout: Optional[float] = None) -> bool:
    """Check if an element is within the viewport bounds.

    Args:
        locator: Locator resolving to the element to check
        page: The page instance
        timeout: Timeout in milliseconds for resolving the element

    Returns:
        bool: True if element is in viewport, False otherwise
    """
    bbox = await locator.bounding_box(timeout=timeout)
    if not bbox:
        return False

    viewport = page.viewport_size
    if not viewport:
        return False

    return (
        bbox['x'] >= 0 and
        bbox['y'] >= 0 and
        bbox['x'] + bbox['width'] <= viewport['width'] and
        bbox['y'] + bbox['height'] <= viewport['height']
    )
