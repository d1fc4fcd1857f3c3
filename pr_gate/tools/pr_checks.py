# AGPL-3.0 License

"""
PR Checks tool - runs the gate checks for one pull request.

Builds the check context from validated configuration, runs the
checker and reports the steps on the console.
"""

from typing import Optional

from pr_gate.checks.check_context import CheckContext
from pr_gate.checks.orchestrator import PullRequestChecker
from pr_gate.config_loader import GateConfig
from pr_gate.git_providers.git_provider import PullRequestSource
from pr_gate.git_providers.github_provider import GithubProvider
from pr_gate.log import get_logger
from pr_gate.tools.reporter import StepReporter


class PRChecks:
    """
    PR Checks tool - executes the gate checks and reports results.
    """

    def __init__(
        self,
        config: GateConfig,
        source: Optional[PullRequestSource] = None,
        reporter: Optional[StepReporter] = None
    ):
        """
        Initialize PR Checks tool.

        Args:
            config: Validated run configuration
            source: Pull request source; a GitHub provider is built if omitted
            reporter: Step reporter; reports to stdout if omitted
        """
        self.config = config
        self.source = source or GithubProvider(
            token=config.github.token,
            base_url=config.github.api_url,
        )
        self.reporter = reporter or StepReporter()
        self.logger = get_logger()

    def _build_check_context(self) -> CheckContext:
        return CheckContext(
            settings=self.config.checks,
            source=self.source,
            owner=self.config.github.owner,
            repo=self.config.github.repo,
            number=self.config.github.pull_request,
        )

    def run(self) -> int:
        """
        Execute checks and report results.

        Returns:
            Process exit code

        Raises:
            ConfigurationError: If a check cannot use its configuration
        """
        github = self.config.github
        self.logger.info(f"Running checks on PR: {github.owner}/{github.repo}#{github.pull_request}")

        checker = PullRequestChecker(self._build_check_context()).run()

        self.logger.info(f"Checks completed: {len(checker.steps)} steps, {checker.errors} error(s), {checker.signal.value}")
        return self.reporter.report(checker.steps, checker.errors)
