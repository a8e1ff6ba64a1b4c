"""
Models module for assertion steps.
Contains the step variants produced by the assertion builders.

A step pairs a deferred driver query with the predicate that turns the queried
value into a verdict. Steps are immutable and perform no I/O until ``run`` is awaited.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, ClassVar, Optional, Tuple, Union

from ..driver.protocol import Driver
from ..expect import Verdict

class StepKind(Enum):
    """Shape of the value a step queries"""
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    GEOMETRY = "geometry"
    MAYBE = "maybe"
    TASK = "task"
    WEBDRIVER = "webdriver"

@dataclass(frozen=True)
class StepMetadata:
    """Descriptive information attached to a step"""
    name: str

@dataclass(frozen=True)
class _QueryStep:
    metadata: StepMetadata
    query: Callable[[Driver], Awaitable]
    predicate: Callable[..., Verdict]

    @property
    def name(self) -> str:
        return self.metadata.name

    async def run(self, driver: Driver) -> Verdict:
        """Execute the query against the driver and judge its value.

        Driver errors raised by the query propagate unchanged.
        """
        value = await self.query(driver)
        return self.predicate(value)

@dataclass(frozen=True)
class AssertionString(_QueryStep):
    query: Callable[[Driver], Awaitable[str]]
    predicate: Callable[[str], Verdict]
    kind: ClassVar[StepKind] = StepKind.STRING

@dataclass(frozen=True)
class AssertionBool(_QueryStep):
    query: Callable[[Driver], Awaitable[bool]]
    predicate: Callable[[bool], Verdict]
    kind: ClassVar[StepKind] = StepKind.BOOL

@dataclass(frozen=True)
class AssertionInt(_QueryStep):
    query: Callable[[Driver], Awaitable[int]]
    predicate: Callable[[int], Verdict]
    kind: ClassVar[StepKind] = StepKind.INT

@dataclass(frozen=True)
class AssertionGeometry(_QueryStep):
    query: Callable[[Driver], Awaitable[Tuple[int, int]]]
    predicate: Callable[[Tuple[int, int]], Verdict]
    kind: ClassVar[StepKind] = StepKind.GEOMETRY

@dataclass(frozen=True)
class AssertionMaybe(_QueryStep):
    """Step over an optional value.

    The predicate receives ``None`` when the value is absent; builders compose it
    so that absence is always a failed verdict.
    """
    query: Callable[[Driver], Awaitable[Optional[str]]]
    predicate: Callable[[Optional[str]], Verdict]
    kind: ClassVar[StepKind] = StepKind.MAYBE

@dataclass(frozen=True)
class AssertionTask:
    """Step whose verdict is computed without the browser session"""
    metadata: StepMetadata
    verdict: Callable[[], Awaitable[Verdict]]
    kind: ClassVar[StepKind] = StepKind.TASK

    @property
    def name(self) -> str:
        return self.metadata.name

    async def run(self, driver: Optional[Driver] = None) -> Verdict:
        return await self.verdict()

@dataclass(frozen=True)
class AssertionWebdriver:
    """Step owning its whole interaction with the driver"""
    metadata: StepMetadata
    command: Callable[[Driver], Awaitable[Verdict]]
    kind: ClassVar[StepKind] = StepKind.WEBDRIVER

    @property
    def name(self) -> str:
        return self.metadata.name

    async def run(self, driver: Driver) -> Verdict:
        return await self.command(driver)

Step = Union[
    AssertionString,
    AssertionBool,
    AssertionInt,
    AssertionGeometry,
    AssertionMaybe,
    AssertionTask,
    AssertionWebdriver,
]
