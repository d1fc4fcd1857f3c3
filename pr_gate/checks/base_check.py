# AGPL-3.0 License

"""
Base class for all gate checks.
"""

from abc import ABC, abstractmethod

from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.check_result import CheckStep, StepId, StepStatus
from pr_gate.errors import ExternalFetchError


class BaseCheck(ABC):
    """
    Abstract base class for all gate checks.

    A check evaluates one policy and returns exactly one CheckStep.
    Checks never raise for policy failures or fetch failures; only
    configuration problems escape as ConfigurationError.
    """

    step_id: StepId

    @property
    def name(self) -> str:
        return self.step_id.value

    def step(self, status: StepStatus, message: str, exit_pipeline: bool = False) -> CheckStep:
        return CheckStep(id=self.step_id, status=status, message=message, exit=exit_pipeline)

    def fetch_failure_step(self, context: CheckContext, error: ExternalFetchError) -> CheckStep:
        """
        Convert a fetch failure into a step according to the ignore policy.

        Args:
            context: Check context
            error: The failure raised by the pull request source

        Returns:
            Skip step when errors are ignored, error step otherwise
        """
        if context.settings.ignore_github_error:
            return self.step(StepStatus.SKIP, str(error))
        return self.step(StepStatus.ERROR, str(error))

    @abstractmethod
    def run(self, context: CheckContext) -> CheckStep:
        """
        Execute the check and return its step.

        Args:
            context: Check context with PR information

        Returns:
            CheckStep describing the outcome
        """
        pass
