"""
Driver level errors.
Raised when the browser session cannot be reached or a query cannot be executed.
These are distinct from failed verdicts and propagate unchanged through assertion steps.
"""

class DriverError(RuntimeError):
    """Base error for failures talking to or querying the browser session"""

class SessionUnavailableError(DriverError):
    """The browser session has no page to query."""

class ElementNotFoundError(DriverError):
    """No element matches the selector."""

    def __init__(self, selector: str):
        super().__init__(f"No element matches selector '{selector}'")
        self.selector = selector

class AmbiguousSelectorError(DriverError):
    """More than one element matches a selector that must identify a single element."""

    def __init__(self, selector: str, count: int):
        super().__init__(f"Selector '{selector}' matches {count} elements, expected exactly one")
        self.selector = selector
        self.count = count
