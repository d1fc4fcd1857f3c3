# AGPL-3.0 License

"""
Unit tests for the pull request checker pipeline.
"""

import pytest

from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.check_result import PipelineSignal, StepId, StepStatus
from pr_gate.checks.check_settings import CheckSettings
from pr_gate.checks.built_in_checks import TitlePrefixCheck
from pr_gate.checks.orchestrator import PullRequestChecker
from pr_gate.errors import ConfigurationError, FetchNetworkError
from pr_gate.git_providers.git_provider import PullRequestData, StaticPullRequestSource

PR_TITLE = "feat: add a new feature"
UNCHECKED_BODY = "## Checklist\n- [ ] tests\n- [ ] docs\n- [ ] changelog\n"


@pytest.fixture
def source():
    return StaticPullRequestSource(data=PullRequestData(labels=("label1", "label2"), body=UNCHECKED_BODY))


def make_checker(source, **settings):
    settings.setdefault("title", PR_TITLE)
    context = CheckContext(
        settings=CheckSettings.from_strings(**settings),
        source=source,
        owner="octo",
        repo="gate",
        number=7,
    )
    return PullRequestChecker(context)


class TestPullRequestChecker:

    def test_all_empty_policies_skip(self, source):
        checker = make_checker(source, checklist=False).run()

        assert [step.status for step in checker.steps] == [StepStatus.SKIP] * 4
        assert checker.errors == 0
        assert checker.signal == PipelineSignal.CONTINUE
        assert source.calls == []

    def test_fixed_execution_order(self, source):
        checker = make_checker(source).run()

        assert [step.id for step in checker.steps] == [
            StepId.LABELS,
            StepId.PREFIX,
            StepId.REGEXP,
            StepId.CHECKLIST,
        ]

    def test_errors_are_counted(self, source):
        checker = make_checker(
            source,
            prefixes="chore:",
            regexp=r"^chore:.*$",
            skip_on_labels="label3,label4",
            checklist=True,
        ).run()

        assert [step.status for step in checker.steps] == [
            StepStatus.SUCCESS,
            StepStatus.ERROR,
            StepStatus.ERROR,
            StepStatus.ERROR,
        ]
        assert checker.errors == 3
        assert checker.signal == PipelineSignal.STOP_FAILURE

    def test_errors_match_error_steps(self, source):
        checker = make_checker(source, prefixes="feat:", regexp=r"^chore:", checklist=True).run()

        assert checker.errors == sum(1 for step in checker.steps if step.is_error)

    def test_skip_label_stops_pipeline(self, source):
        source.data = PullRequestData(labels=("label1",), body=UNCHECKED_BODY)
        checker = make_checker(
            source,
            prefixes="chore:",
            regexp=r"^chore:",
            skip_on_labels="label1",
            checklist=True,
        ).run()

        assert len(checker.steps) == 1
        assert checker.steps[0].id == StepId.LABELS
        assert checker.steps[0].exit
        assert checker.errors == 0
        assert checker.signal == PipelineSignal.STOP_SUCCESS

    def test_pull_request_fetched_once(self, source):
        make_checker(source, skip_on_labels="label3", checklist=True).run()

        assert len(source.calls) == 1

    def test_fetch_error_ignored_does_not_stop(self):
        source = StaticPullRequestSource(error=FetchNetworkError("boom"))
        checker = make_checker(source, skip_on_labels="label1", checklist=True, prefixes="feat:").run()

        assert [step.status for step in checker.steps] == [
            StepStatus.SKIP,
            StepStatus.SUCCESS,
            StepStatus.SKIP,
            StepStatus.SKIP,
        ]
        assert checker.steps[0].message == "boom"
        assert not checker.stopped
        assert checker.errors == 0

    def test_fetch_error_reported(self):
        source = StaticPullRequestSource(error=FetchNetworkError("boom"))
        checker = make_checker(source, skip_on_labels="label1", checklist=True, ignore_github_error=False).run()

        assert checker.steps[0].status == StepStatus.ERROR
        assert checker.steps[3].status == StepStatus.ERROR
        assert checker.errors == 2
        # Failed fetches are not cached
        assert len(source.calls) == 2

    def test_chained_calls(self, source):
        checker = make_checker(source, prefixes="feat:", skip_on_labels="label3")
        result = checker.check_labels().check_title_prefixes().check_title_regexp().check_checklist()

        assert result is checker
        assert [step.status for step in checker.steps] == [
            StepStatus.SUCCESS,
            StepStatus.SUCCESS,
            StepStatus.SKIP,
            StepStatus.SKIP,
        ]

    def test_chained_calls_after_exit_are_noops(self, source):
        checker = make_checker(source, prefixes="chore:", skip_on_labels="label2")
        checker.check_labels().check_title_prefixes()

        assert len(checker.steps) == 1
        assert checker.errors == 0

    def test_custom_checks(self, source):
        checker = make_checker(source, prefixes="feat:")
        checker.checks = [TitlePrefixCheck()]
        checker.run()

        assert [step.id for step in checker.steps] == [StepId.PREFIX]

    def test_invalid_pattern_aborts(self, source):
        checker = make_checker(source, regexp="(unclosed")

        with pytest.raises(ConfigurationError):
            checker.run()

    def test_runs_are_identical(self, source):
        settings = dict(prefixes="feat:", regexp=r"^chore:", skip_on_labels="label9", checklist=True)
        first = make_checker(source, **settings).run()
        second = make_checker(source, **settings).run()

        assert first.steps == second.steps
        assert [str(step) for step in first.steps] == [str(step) for step in second.steps]
        assert first.errors == second.errors
