# AGPL-3.0 License

"""
Check orchestration and execution management.
"""

from typing import Optional

from pr_gate.checks.base_check import BaseCheck
from pr_gate.checks.built_in_checks import (
    ChecklistCheck,
    SkipLabelsCheck,
    TitlePrefixCheck,
    TitleRegexCheck,
)
from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.check_result import CheckStep, PipelineSignal
from pr_gate.log import get_logger


class PullRequestChecker:
    """
    Runs the gate checks in a fixed order and accumulates their steps.

    Each check returns its own step; the checker alone appends it and
    updates the error counter. Once an opt-out step is recorded the
    remaining checks are not run.
    """

    def __init__(
        self,
        context: CheckContext,
        checks: Optional[list[BaseCheck]] = None
    ):
        """
        Initialize the checker.

        Args:
            context: Check context with settings and pull request source
            checks: Checks to run by `run`; defaults to labels, prefixes,
                regexp, checklist
        """
        self.context = context
        self.checks = checks if checks is not None else [
            SkipLabelsCheck(),
            TitlePrefixCheck(),
            TitleRegexCheck(),
            ChecklistCheck(),
        ]
        self.steps: list[CheckStep] = []
        self.errors = 0
        self.stopped = False
        self.logger = get_logger()

    def run(self) -> "PullRequestChecker":
        """Execute all checks sequentially."""
        self.logger.info(f"Running {len(self.checks)} checks sequentially")
        for check in self.checks:
            self.run_check(check)
        return self

    def run_check(self, check: BaseCheck) -> "PullRequestChecker":
        """
        Execute a single check and record its step.

        Does nothing once the pipeline has been stopped by an opt-out step.
        """
        if self.stopped:
            self.logger.debug(f"Check {check.name} not run - pipeline stopped")
            return self

        self.logger.info(f"Running check: {check.name}")
        step = check.run(self.context)
        self.logger.info(f"Check {check.name} completed: {step.status.value}")
        return self.record(step)

    def record(self, step: CheckStep) -> "PullRequestChecker":
        self.steps.append(step)
        if step.is_error:
            self.errors += 1
        if step.signal == PipelineSignal.STOP_SUCCESS:
            self.stopped = True
        return self

    def check_labels(self) -> "PullRequestChecker":
        return self.run_check(SkipLabelsCheck())

    def check_title_prefixes(self) -> "PullRequestChecker":
        return self.run_check(TitlePrefixCheck())

    def check_title_regexp(self) -> "PullRequestChecker":
        return self.run_check(TitleRegexCheck())

    def check_checklist(self) -> "PullRequestChecker":
        return self.run_check(ChecklistCheck())

    @property
    def signal(self) -> PipelineSignal:
        """
        How the pipeline ended.

        Returns:
            STOP_SUCCESS after an opt-out, STOP_FAILURE if any check
            failed, CONTINUE otherwise
        """
        if self.stopped:
            return PipelineSignal.STOP_SUCCESS
        if self.errors > 0:
            return PipelineSignal.STOP_FAILURE
        return PipelineSignal.CONTINUE
