"""
Page level assertions.
Builders for steps checking the url, title, html and cookies of the current page.
"""

from typing import Callable

from ..expect import Verdict
from .base import COOKIE_ABSENT, create_metadata, expect_true, when_present
from .models import AssertionBool, AssertionMaybe, AssertionString

def url(predicate: Callable[[str], Verdict]) -> AssertionString:
    """Assert on the url of the current page.

    Args:
        predicate: Judges the url

    Returns:
        AssertionString: Deferred step
    """
    return AssertionString(
        metadata=create_metadata("Assert the current url"),
        query=lambda driver: driver.get_url(),
        predicate=predicate
    )

def title(predicate: Callable[[str], Verdict]) -> AssertionString:
    """Assert on the title of the current page."""
    return AssertionString(
        metadata=create_metadata("Assert the page title"),
        query=lambda driver: driver.get_title(),
        predicate=predicate
    )

def page_source(predicate: Callable[[str], Verdict]) -> AssertionString:
    """Assert on the html of the whole page."""
    return AssertionString(
        metadata=create_metadata("Assert the page html"),
        query=lambda driver: driver.get_page_html(),
        predicate=predicate
    )

def cookie(name: str, predicate: Callable[[str], Verdict]) -> AssertionMaybe:
    """Assert on the value of a cookie.

    The step fails with "The cookie does not exist" when the cookie is missing,
    without calling the predicate.

    Args:
        name: Cookie name
        predicate: Judges the cookie value when the cookie exists

    Returns:
        AssertionMaybe: Deferred step
    """
    return AssertionMaybe(
        metadata=create_metadata("Assert the value of cookie '{name}'", name=name),
        query=lambda driver: driver.get_cookie(name),
        predicate=when_present(COOKIE_ABSENT, predicate)
    )

def cookie_exists(name: str) -> AssertionBool:
    return AssertionBool(
        metadata=create_metadata("Assert that cookie '{name}' exists", name=name),
        query=lambda driver: driver.cookie_exists(name),
        predicate=expect_true(f"The cookie '{name}' does not exist")
    )

def cookie_not_exists(name: str) -> AssertionBool:
    return AssertionBool(
        metadata=create_metadata("Assert that cookie '{name}' does not exist", name=name),
        query=lambda driver: driver.cookie_not_exists(name),
        predicate=expect_true(f"The cookie '{name}' exists")
    )
