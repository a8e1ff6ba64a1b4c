"""
Runner package.
Runs assertion steps against a driver and reports their outcomes.
"""

from .models import StepResult, StepStatus
from .reporter import StepReporter
from .step_runner import StepRunner

__all__ = [
    'StepResult',
    'StepStatus',
    'StepReporter',
    'StepRunner'
]
