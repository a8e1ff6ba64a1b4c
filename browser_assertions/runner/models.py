"""
Shared data structures for step runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

class StepStatus(Enum):
    """Outcome of running a step"""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"

@dataclass
class StepResult:
    """Recorded outcome of a single step"""
    name: str
    kind: str
    status: StepStatus
    message: Optional[str] = None
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return self.status is StepStatus.PASSED
