# AGPL-3.0 License

"""
Console reporting of gate steps.
"""

import sys
from typing import Optional, TextIO

from pr_gate.checks.check_result import CheckStep
from pr_gate.log import get_logger

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


class StepReporter:
    """
    Renders steps one per line and maps the outcome to an exit code.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.logger = get_logger()

    def report(self, steps: list[CheckStep], errors: int) -> int:
        """
        Print steps in order, log the error summary and return the exit code.

        Printing stops at the first step that requests an exit; the run
        then succeeds regardless of earlier steps.

        Args:
            steps: Steps in execution order
            errors: Number of failed checks

        Returns:
            EXIT_SUCCESS or EXIT_FAILURE
        """
        for step in steps:
            print(str(step), file=self.stream)
            if step.exit:
                self.logger.info("Skip label detected, remaining checks skipped")
                return EXIT_SUCCESS

        if errors > 0:
            self.logger.error(f"Found {errors} errors")
            return EXIT_FAILURE

        return EXIT_SUCCESS
