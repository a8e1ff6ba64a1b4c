import json
import logging
import os
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .models import StepResult, StepStatus

logger = logging.getLogger("browser_assertions.runner.reporter")

class StepReporter:
    def __init__(self, report_dir: str = "reports"):
        self.report_dir = report_dir
        self.results: List[StepResult] = []

    def log_result(self, result: StepResult):
        self.results.append(result)

    def summary(self) -> Dict[str, Any]:
        total = len(self.results)
        passed = sum(1 for r in self.results if r.status is StepStatus.PASSED)
        failed = sum(1 for r in self.results if r.status is StepStatus.FAILED)
        errored = sum(1 for r in self.results if r.status is StepStatus.ERROR)
        return {
            "total": total,
            "passed": passed,
            "failed": failed,
            "errored": errored,
            "success_rate": (passed / total) * 100 if total > 0 else 0
        }

    def generate_report(self, path: Optional[str] = None) -> str:
        if path is None:
            path = os.path.join(self.report_dir, "step_report.json")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        report = {
            "summary": self.summary(),
            "steps": [
                {**asdict(result), "status": result.status.value}
                for result in self.results
            ]
        }
        with open(path, "w", encoding="utf-8") as report_file:
            json.dump(report, report_file, indent=4)
        logger.info(f"Step report written to {path}")
        return path
