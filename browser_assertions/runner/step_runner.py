"""
Step runner.
Executes assertion steps against a driver one at a time and records their outcomes.
"""

import logging
import time
from typing import Iterable, List, Optional

from ..assertions.models import Step
from ..driver.errors import DriverError
from ..driver.protocol import Driver
from .models import StepResult, StepStatus
from .reporter import StepReporter

logger = logging.getLogger("browser_assertions.runner.step_runner")

class StepRunner:
    """Runs steps sequentially against a single driver.

    Failed verdicts and driver errors are recorded as results; any other
    exception raised by a step propagates to the caller.
    """

    def __init__(self, driver: Driver, reporter: Optional[StepReporter] = None):
        """Initialize the runner.

        Args:
            driver: Driver every step runs against
            reporter: Optional reporter receiving each result

        Raises:
            ValueError: If driver is None.
        """
        if driver is None:
            raise ValueError("Driver cannot be None")
        self.driver = driver
        self.reporter = reporter

    async def run_step(self, step: Step) -> StepResult:
        """Run one step and record its outcome.

        Args:
            step: The step to run

        Returns:
            StepResult: Passed, failed or errored result for the step
        """
        name = step.metadata.name
        logger.debug(f"Running step: {name}")
        started = time.perf_counter()
        try:
            verdict = await step.run(self.driver)
        except DriverError as e:
            logger.error(f"❌ Step '{name}' raised a driver error: {str(e)}", exc_info=True)
            result = StepResult(
                name=name,
                kind=step.kind.value,
                status=StepStatus.ERROR,
                message=str(e),
                duration=time.perf_counter() - started
            )
        else:
            if verdict.passed:
                logger.info(f"✅ Step passed: {name}")
                status = StepStatus.PASSED
            else:
                logger.warning(f"❌ Step failed: {name}: {verdict.message}")
                status = StepStatus.FAILED
            result = StepResult(
                name=name,
                kind=step.kind.value,
                status=status,
                message=verdict.message,
                duration=time.perf_counter() - started
            )

        if self.reporter is not None:
            self.reporter.log_result(result)
        return result

    async def run_steps(self, steps: Iterable[Step], stop_on_error: bool = False) -> List[StepResult]:
        """Run steps in order.

        Args:
            steps: Steps to run
            stop_on_error: Stop after the first step that raised a driver error

        Returns:
            List[StepResult]: One result per step that ran
        """
        results = []
        for step in steps:
            result = await self.run_step(step)
            results.append(result)
            if stop_on_error and result.status is StepStatus.ERROR:
                logger.warning(f"Stopping run after driver error in step '{result.name}'")
                break

        self._log_summary(results)
        return results

    def _log_summary(self, results: List[StepResult]) -> None:
        total_steps = len(results)
        passed_steps = sum(1 for r in results if r.status is StepStatus.PASSED)
        failed_steps = sum(1 for r in results if r.status is StepStatus.FAILED)
        errored_steps = total_steps - passed_steps - failed_steps
        success_rate = (passed_steps / total_steps) * 100 if total_steps > 0 else 0

        logger.info(f"Step Summary:")
        logger.info(f"Total Steps: {total_steps}")
        logger.info(f"Passed Steps: {passed_steps}")
        logger.info(f"Failed Steps: {failed_steps}")
        logger.info(f"Errored Steps: {errored_steps}")
        logger.info(f"Success Rate: {success_rate:.1f}%")
