# AGPL-3.0 License

"""
Gate check engine for PR Gate.

This module provides the checks evaluated against a pull request and
the checker that runs them in order and accumulates their steps.
"""

from pr_gate.checks.base_check import BaseCheck
from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.check_result import CheckStep, PipelineSignal, StepId, StepStatus
from pr_gate.checks.check_settings import CheckSettings
from pr_gate.checks.built_in_checks import (
    ChecklistCheck,
    SkipLabelsCheck,
    TitlePrefixCheck,
    TitleRegexCheck,
)
from pr_gate.checks.orchestrator import PullRequestChecker

__all__ = [
    "BaseCheck",
    "CheckContext",
    "CheckStep",
    "CheckSettings",
    "PipelineSignal",
    "StepId",
    "StepStatus",
    "ChecklistCheck",
    "SkipLabelsCheck",
    "TitlePrefixCheck",
    "TitleRegexCheck",
    "PullRequestChecker",
]
