# main.py
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from config import DEMO_TRIALS, PAUSE_PROMPT
from core.utils import make_rng
from lessons import LESSONS, LessonReport
from logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_STATUS_HELP = "Exit status is 0 when every lesson check holds and 1 when any check fails."


class Application:
    """
    Console walkthrough of the vector lessons.
    """
    def __init__(self, seed: Optional[int] = None, trials: int = DEMO_TRIALS,
                 lessons: Optional[List[str]] = None, pause: bool = True,
                 out: Optional[TextIO] = None):
        self.rng, self.seed = make_rng(seed)
        self.trials = trials
        self.lesson_names = lessons or list(LESSONS)
        self.pause = pause
        self.out = out if out is not None else sys.stdout
        self.reports: List[LessonReport] = []

        unknown = [name for name in self.lesson_names if name not in LESSONS]
        if unknown:
            raise ValueError(f"Unknown lesson(s): {', '.join(unknown)}")

    def run(self) -> int:
        logger.info("Running %d lesson(s) with seed %d", len(self.lesson_names), self.seed)
        for name in self.lesson_names:
            lesson = LESSONS[name](self.rng, out=self.out, trials=self.trials)
            self.reports.append(lesson.run())

        self.print_summary()
        self.wait_for_key()
        return 0 if all(report.ok for report in self.reports) else 1

    def print_summary(self) -> None:
        print(f"Seed: {self.seed}", file=self.out)
        for report in self.reports:
            print(f"{report.name}: {report.passed}/{report.checks} checks passed", file=self.out)
            if report.skipped:
                print(f"  skipped: {report.skipped}", file=self.out)
            for failure in report.failures:
                print(f"  FAILED: {failure}", file=self.out)

    def wait_for_key(self) -> None:
        if not self.pause:
            return
        print(PAUSE_PROMPT, end="", file=self.out, flush=True)
        try:
            input()
        except (EOFError, KeyboardInterrupt):
            # stdin closed or interrupted; nothing left to wait for
            print(file=self.out)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Worked examples of vector algebra for game engines.",
        epilog=EXIT_STATUS_HELP,
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed (defaults to the system clock)")
    parser.add_argument("--trials", type=int, default=DEMO_TRIALS,
                        help="random samples drawn by each lesson step")
    parser.add_argument("--lesson", action="append", choices=sorted(LESSONS), dest="lessons",
                        help="lesson to run (repeatable, default: all)")
    parser.add_argument("--no-pause", action="store_false", dest="pause",
                        help="exit without waiting for Enter")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    app = Application(seed=args.seed, trials=args.trials, lessons=args.lessons, pause=args.pause)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
