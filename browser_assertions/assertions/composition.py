"""
Custom assertion steps.
Escape hatches for checks the property builders do not cover: a session
independent verdict, a single custom driver interaction, or an ordered batch of
driver interactions judged together.
"""

import logging
from typing import Any, Awaitable, Callable, List, Sequence

from ..driver.protocol import Driver
from ..expect import Verdict
from .base import custom_metadata
from .models import AssertionTask, AssertionWebdriver

logger = logging.getLogger("browser_assertions.assertions.composition")

Command = Callable[[Driver], Awaitable[Any]]

def task(name: str, verdict: Callable[[], Awaitable[Verdict]]) -> AssertionTask:
    """Wrap a deferred verdict that does not need the browser session.

    Args:
        name: Step name used in reports
        verdict: Zero-argument coroutine function producing the verdict

    Returns:
        AssertionTask: Deferred step
    """
    return AssertionTask(metadata=custom_metadata(name), verdict=verdict)

def driver_command(name: str, command: Command, predicate: Callable[[Any], Verdict]) -> AssertionWebdriver:
    """Wrap a single custom driver interaction.

    Args:
        name: Step name used in reports
        command: Coroutine function taking the driver and returning a raw value
        predicate: Judges the raw value

    Returns:
        AssertionWebdriver: Deferred step; driver errors raised by the command propagate
    """
    async def run(driver: Driver) -> Verdict:
        value = await command(driver)
        return predicate(value)

    return AssertionWebdriver(metadata=custom_metadata(name), command=run)

def sequence_commands(
    name: str,
    commands: Sequence[Command],
    predicate: Callable[[List[Any]], Verdict]
) -> AssertionWebdriver:
    """Wrap an ordered batch of driver interactions judged as one step.

    Commands run one after another against the same driver, never concurrently.
    The value of the command at index i is at index i of the list handed to the
    predicate. The first driver error aborts the batch, skips the remaining
    commands and propagates; the predicate only sees a complete list.

    Args:
        name: Step name used in reports
        commands: Non-empty sequence of coroutine functions taking the driver
        predicate: Judges the ordered list of values

    Returns:
        AssertionWebdriver: Deferred step

    Raises:
        ValueError: If commands is empty.
    """
    batch = tuple(commands)
    if not batch:
        raise ValueError("At least one command is required")

    async def run(driver: Driver) -> Verdict:
        values = []
        for index, command in enumerate(batch):
            logger.debug(f"[{name}] Running command {index + 1}/{len(batch)}")
            values.append(await command(driver))
        return predicate(values)

    return AssertionWebdriver(metadata=custom_metadata(name), command=run)
