"""
Driver package.
Query capability used by assertion steps and its browser-use implementation.
"""

from .errors import (
    DriverError,
    SessionUnavailableError,
    ElementNotFoundError,
    AmbiguousSelectorError
)
from .protocol import Driver
from .queries import BrowserQueries

__all__ = [
    'DriverError',
    'SessionUnavailableError',
    'ElementNotFoundError',
    'AmbiguousSelectorError',
    'Driver',
    'BrowserQueries'
]
