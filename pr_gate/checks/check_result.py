# AGPL-3.0 License

"""
Check step data structures.
"""

from dataclasses import dataclass
from enum import Enum


class StepId(str, Enum):
    """Identifier of the check that produced a step."""
    PREFIX = "prefix"
    REGEXP = "regexp"
    LABELS = "labels"
    CHECKLIST = "checklist"


class StepStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    SKIP = "skip"


class PipelineSignal(Enum):
    """
    Control value telling the caller how the pipeline ended.
    """

    CONTINUE = "continue"
    """No early termination and no errors"""

    STOP_SUCCESS = "stop_success"
    """An opt-out label was found; the run succeeds without further checks"""

    STOP_FAILURE = "stop_failure"
    """At least one check reported an error"""


STATUS_GLYPHS = {
    StepStatus.SUCCESS: "✅",
    StepStatus.ERROR: "❌",
    StepStatus.SKIP: "🦘",
}


@dataclass(frozen=True)
class CheckStep:
    """
    Recorded outcome of one check.

    Attributes:
        id: Which check produced this step
        status: Outcome of the check
        message: Human-readable summary message
        exit: Terminate the pipeline successfully after this step
    """
    id: StepId
    status: StepStatus
    message: str
    exit: bool = False

    @property
    def is_error(self) -> bool:
        return self.status == StepStatus.ERROR

    @property
    def signal(self) -> PipelineSignal:
        if self.exit:
            return PipelineSignal.STOP_SUCCESS
        return PipelineSignal.CONTINUE

    def __str__(self) -> str:
        glyph = STATUS_GLYPHS[self.status]
        return f"{glyph} step={self.id.value} message={self.message.lower()}"
