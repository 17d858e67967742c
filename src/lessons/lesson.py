# lessons/lesson.py
import logging
import random
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from config import DEMO_TRIALS

logger = logging.getLogger(__name__)


@dataclass
class LessonReport:
    """Outcome of one lesson: how many checks ran and how many held."""
    name: str
    checks: int = 0
    passed: int = 0
    skipped: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.checks - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0


class Lesson:
    """
    Abstract console lesson. Subclasses must implement run_steps().

    A lesson narrates worked examples to a text stream and records every
    property it demonstrates as a check in its report.
    """
    name = "lesson"
    title = "Lesson"

    def __init__(self, rng: random.Random, out: Optional[TextIO] = None, trials: int = DEMO_TRIALS):
        if trials < 1:
            raise ValueError("trials must be at least 1")
        self.rng = rng
        self.out = out if out is not None else sys.stdout
        self.trials = trials
        self.report = LessonReport(self.name)

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def check(self, description: str, passed: bool) -> bool:
        self.report.checks += 1
        if passed:
            self.report.passed += 1
        else:
            self.report.failures.append(description)
            logger.warning("%s: check failed: %s", self.name, description)
        return passed

    def skip(self, reason: str) -> None:
        self.report.skipped += 1
        self.say(f"Skipped: {reason}.")
        logger.info("%s: skipped: %s", self.name, reason)

    def run(self) -> LessonReport:
        self.report = LessonReport(self.name)
        self.say(self.title)
        self.say("-" * len(self.title))
        self.run_steps()
        self.say()
        logger.info("%s: %d/%d checks passed", self.name, self.report.passed, self.report.checks)
        return self.report

    def run_steps(self) -> None:
        raise NotImplementedError("run_steps() must be implemented by subclasses.")
