# AGPL-3.0 License

"""
Built-in check implementations.

The four policies a gate run evaluates: opt-out labels, title prefixes,
title pattern and checklist completion.
"""

import re

from pr_gate.algo.checklist import count_unchecked, extract_checklist
from pr_gate.checks.base_check import BaseCheck
from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.check_result import CheckStep, StepId, StepStatus
from pr_gate.errors import ConfigurationError, ExternalFetchError
from pr_gate.log import get_logger

PREFIX_SKIP_MSG = "No prefixes to check"
PREFIX_ERR_MSG = "PR title does not have any required prefix ({})"
PREFIX_SUCCESS_MSG = "Prefixes check passed"
LABELS_SKIP_MSG = "No labels to check"
LABELS_EXIT_MSG = "Skipping checks, skip label detected"
LABELS_SUCCESS_MSG = "Labels check passed"
REGEXP_SKIP_MSG = "No regexp to check"
REGEXP_ERR_MSG = "PR title does not match specified regular expression"
REGEXP_SUCCESS_MSG = "Regular expression check passed"
CHECKLIST_SKIP_MSG = "Checklist checks disabled"
CHECKLIST_ERR_MSG = "Found {} unchecked checklist items"
CHECKLIST_SUCCESS_MSG = "Checklist check passed"


def compile_title_pattern(pattern: str) -> re.Pattern:
    """
    Compile a title pattern.

    Raises:
        ConfigurationError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid title regular expression {pattern!r}: {e}") from e


class SkipLabelsCheck(BaseCheck):
    """
    Opt-out check: a PR carrying any of the skip labels passes the gate
    without running further checks.
    """

    step_id = StepId.LABELS

    def run(self, context: CheckContext) -> CheckStep:
        skip_on_labels = context.settings.skip_on_labels
        if not skip_on_labels:
            return self.step(StepStatus.SKIP, LABELS_SKIP_MSG)

        try:
            pull_request = context.get_pull_request()
        except ExternalFetchError as e:
            get_logger().warning(f"Could not fetch labels: {e}")
            return self.fetch_failure_step(context, e)

        for label in skip_on_labels:
            if label in pull_request.labels:
                get_logger().info(f"Skip label '{label}' detected")
                return self.step(StepStatus.SKIP, LABELS_EXIT_MSG, exit_pipeline=True)

        return self.step(StepStatus.SUCCESS, LABELS_SUCCESS_MSG)


class TitlePrefixCheck(BaseCheck):
    """
    Require the PR title to start with one of the configured prefixes.
    Comparison is case-insensitive.
    """

    step_id = StepId.PREFIX

    def run(self, context: CheckContext) -> CheckStep:
        prefixes = context.settings.prefixes
        if not prefixes:
            return self.step(StepStatus.SKIP, PREFIX_SKIP_MSG)

        title = context.settings.title.lower()
        for prefix in prefixes:
            if title.startswith(prefix.lower()):
                return self.step(StepStatus.SUCCESS, PREFIX_SUCCESS_MSG)

        return self.step(StepStatus.ERROR, PREFIX_ERR_MSG.format(",".join(prefixes)))


class TitleRegexCheck(BaseCheck):
    """
    Require the PR title to match a regular expression.

    The pattern is searched anywhere in the title unless it anchors itself.
    """

    step_id = StepId.REGEXP

    def run(self, context: CheckContext) -> CheckStep:
        if not context.settings.regexp:
            return self.step(StepStatus.SKIP, REGEXP_SKIP_MSG)

        pattern = compile_title_pattern(context.settings.regexp)
        if not pattern.search(context.settings.title):
            return self.step(StepStatus.ERROR, REGEXP_ERR_MSG)

        return self.step(StepStatus.SUCCESS, REGEXP_SUCCESS_MSG)


class ChecklistCheck(BaseCheck):
    """
    Require the checklist in the PR description to be completed.

    The run fails only when more than one item is left unchecked.
    """

    step_id = StepId.CHECKLIST

    # A single unchecked item still passes.
    max_unchecked_items = 1

    def run(self, context: CheckContext) -> CheckStep:
        if not context.settings.checklist:
            return self.step(StepStatus.SKIP, CHECKLIST_SKIP_MSG)

        try:
            pull_request = context.get_pull_request()
        except ExternalFetchError as e:
            get_logger().warning(f"Could not fetch description: {e}")
            return self.fetch_failure_step(context, e)

        items = extract_checklist(pull_request.body, context.settings.checklist_title)
        unchecked = count_unchecked(items)
        get_logger().debug(f"Checklist has {len(items)} item(s), {unchecked} unchecked")

        if unchecked > self.max_unchecked_items:
            return self.step(StepStatus.ERROR, CHECKLIST_ERR_MSG.format(unchecked))

        return self.step(StepStatus.SUCCESS, CHECKLIST_SUCCESS_MSG)
