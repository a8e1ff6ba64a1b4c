"""
Element assertions.
Builders for steps checking elements selected by a css selector.

Selectors are passed through to the driver untouched; the driver requires
element specific queries to match exactly one element.
"""

from typing import Callable, Tuple

from ..expect import Verdict
from .base import (
    ATTRIBUTE_ABSENT,
    CSS_PROPERTY_ABSENT,
    create_metadata,
    expect_true,
    when_present,
)
from .models import (
    AssertionBool,
    AssertionGeometry,
    AssertionInt,
    AssertionMaybe,
    AssertionString,
)

def element_count(selector: str, predicate: Callable[[int], Verdict]) -> AssertionInt:
    """Assert on the number of elements matching a selector.

    Args:
        selector: Css selector, any number of matches allowed
        predicate: Judges the count

    Returns:
        AssertionInt: Deferred step
    """
    return AssertionInt(
        metadata=create_metadata("Assert the number of elements matching '{selector}'", selector=selector),
        query=lambda driver: driver.count_elements(selector),
        predicate=predicate
    )

def attribute(selector: str, name: str, predicate: Callable[[str], Verdict]) -> AssertionMaybe:
    """Assert on an attribute of an element.

    Fails with "The attribute is not present" when the element lacks the attribute.

    Args:
        selector: Css selector of the element
        name: Attribute name
        predicate: Judges the attribute value when present

    Returns:
        AssertionMaybe: Deferred step
    """
    return AssertionMaybe(
        metadata=create_metadata(
            "Assert attribute '{name}' of element '{selector}'", selector=selector, name=name
        ),
        query=lambda driver: driver.get_attribute(selector, name),
        predicate=when_present(ATTRIBUTE_ABSENT, predicate)
    )

def css_property(selector: str, name: str, predicate: Callable[[str], Verdict]) -> AssertionMaybe:
    """Assert on a computed css property of an element.

    Fails with "The css property is not present" when the property has no value.
    """
    return AssertionMaybe(
        metadata=create_metadata(
            "Assert css property '{name}' of element '{selector}'", selector=selector, name=name
        ),
        query=lambda driver: driver.get_css_property(selector, name),
        predicate=when_present(CSS_PROPERTY_ABSENT, predicate)
    )

def element_html(selector: str, predicate: Callable[[str], Verdict]) -> AssertionString:
    return AssertionString(
        metadata=create_metadata("Assert the html of element '{selector}'", selector=selector),
        query=lambda driver: driver.get_element_html(selector),
        predicate=predicate
    )

def element_text(selector: str, predicate: Callable[[str], Verdict]) -> AssertionString:
    return AssertionString(
        metadata=create_metadata("Assert the text of element '{selector}'", selector=selector),
        query=lambda driver: driver.get_text(selector),
        predicate=predicate
    )

def element_value(selector: str, predicate: Callable[[str], Verdict]) -> AssertionString:
    """Assert on the value of an input, textarea or select element."""
    return AssertionString(
        metadata=create_metadata("Assert the value of element '{selector}'", selector=selector),
        query=lambda driver: driver.get_value(selector),
        predicate=predicate
    )

def exists(selector: str) -> AssertionBool:
    """Assert that an element matching the selector exists."""
    return AssertionBool(
        metadata=create_metadata("Assert that element '{selector}' exists", selector=selector),
        query=lambda driver: driver.element_exists(selector),
        predicate=expect_true("The element does not exist")
    )

def input_enabled(selector: str) -> AssertionBool:
    return AssertionBool(
        metadata=create_metadata("Assert that input '{selector}' is enabled", selector=selector),
        query=lambda driver: driver.element_enabled(selector),
        predicate=expect_true(f"The input '{selector}' is not enabled")
    )

def visible(selector: str) -> AssertionBool:
    return AssertionBool(
        metadata=create_metadata("Assert that element '{selector}' is visible", selector=selector),
        query=lambda driver: driver.element_visible(selector),
        predicate=expect_true(f"The element '{selector}' is not visible")
    )

def visible_within_viewport(selector: str) -> AssertionBool:
    """Assert that an element is visible and fully inside the viewport."""
    return AssertionBool(
        metadata=create_metadata(
            "Assert that element '{selector}' is visible within the viewport", selector=selector
        ),
        query=lambda driver: driver.element_visible_within_viewport(selector),
        predicate=expect_true(f"The element '{selector}' is not visible within the viewport")
    )

def option_selected(selector: str) -> AssertionBool:
    return AssertionBool(
        metadata=create_metadata("Assert that option '{selector}' is selected", selector=selector),
        query=lambda driver: driver.option_is_selected(selector),
        predicate=expect_true(f"The option '{selector}' is not selected")
    )

def element_size(selector: str, predicate: Callable[[Tuple[int, int]], Verdict]) -> AssertionGeometry:
    """Assert on the (width, height) of an element in css pixels."""
    return AssertionGeometry(
        metadata=create_metadata("Assert the size of element '{selector}'", selector=selector),
        query=lambda driver: driver.get_element_size(selector),
        predicate=predicate
    )

def element_position(selector: str, predicate: Callable[[Tuple[int, int]], Verdict]) -> AssertionGeometry:
    """Assert on the (x, y) of an element relative to the document."""
    return AssertionGeometry(
        metadata=create_metadata("Assert the position of element '{selector}'", selector=selector),
        query=lambda driver: driver.get_element_position(selector),
        predicate=predicate
    )

def element_view_position(selector: str, predicate: Callable[[Tuple[int, int]], Verdict]) -> AssertionGeometry:
    """Assert on the (x, y) of an element relative to the viewport."""
    return AssertionGeometry(
        metadata=create_metadata(
            "Assert the position of element '{selector}' in the viewport", selector=selector
        ),
        query=lambda driver: driver.get_element_view_position(selector),
        predicate=predicate
    )
