"""
Base module for assertion builders.
Contains metadata derivation and the verdict compositions shared by the builders.
"""

import logging
from typing import Callable, Optional

from ..expect import Verdict
from .models import StepMetadata

logger = logging.getLogger("browser_assertions.assertions")

COOKIE_ABSENT = "The cookie does not exist"
ATTRIBUTE_ABSENT = "The attribute is not present"
CSS_PROPERTY_ABSENT = "The css property is not present"

def create_metadata(template: str, **arguments: str) -> StepMetadata:
    """Create step metadata with a name derived from the builder arguments.

    The same template and arguments always produce the same name, which keeps
    report entries and log lines for a step correlated across runs.

    Args:
        template: Name template with ``str.format`` fields
        **arguments: Values substituted into the template

    Returns:
        StepMetadata: Metadata carrying the derived name
    """
    return StepMetadata(name=template.format(**arguments))

def custom_metadata(name: str) -> StepMetadata:
    """Metadata for caller-named steps.

    Raises:
        ValueError: If name is empty or blank.
    """
    if not name or not name.strip():
        raise ValueError("Step name cannot be empty")
    return StepMetadata(name=name)

def when_present(absent_message: str, predicate: Callable[[str], Verdict]) -> Callable[[Optional[str]], Verdict]:
    """Compose a predicate with a fixed failure for absent values.

    Args:
        absent_message: Failure message used when the value is absent
        predicate: Caller predicate, only ever called with a present value

    Returns:
        Callable: Predicate over the optional value
    """
    def judge(value: Optional[str]) -> Verdict:
        if value is None:
            logger.debug(f"Value absent: {absent_message}")
            return Verdict.fail(absent_message)
        return predicate(value)
    return judge

def expect_true(failure_message: str) -> Callable[[bool], Verdict]:
    """Fixed verdict mapping for boolean checks: True passes, False fails."""
    def judge(value: bool) -> Verdict:
        if value:
            return Verdict.pass_()
        return Verdict.fail(failure_message)
    return judge
