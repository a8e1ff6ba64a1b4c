"""
Browser assertions.
Declarative checks against a live browser session, expressed as deferred, named steps.
"""

from .expect import Verdict
from .config import Settings
from .driver import BrowserQueries, Driver, DriverError
from .runner import StepReporter, StepResult, StepRunner, StepStatus
from . import assertions, expect

__all__ = [
    'Verdict',
    'Settings',
    'BrowserQueries',
    'Driver',
    'DriverError',
    'StepReporter',
    'StepResult',
    'StepRunner',
    'StepStatus',
    'assertions',
    'expect'
]
