# AGPL-3.0 License

"""
Check context data for gate checks.
"""

from dataclasses import dataclass, field
from typing import Optional

from pr_gate.checks.check_settings import CheckSettings
from pr_gate.git_providers.git_provider import PullRequestData, PullRequestSource
from pr_gate.log import get_logger


@dataclass
class CheckContext:
    """
    Context data provided to checks during execution.

    Holds the policy settings, the pull request coordinates and the
    source used to fetch labels and body. The first successful fetch
    is cached for the rest of the run; a failed fetch is not.
    """

    settings: CheckSettings
    source: PullRequestSource

    # Pull request coordinates
    owner: str = ""
    repo: str = ""
    number: int = 0

    _pull_request: Optional[PullRequestData] = field(default=None, init=False, repr=False)

    def get_pull_request(self) -> PullRequestData:
        """
        Return the pull request data, fetching it on first use.

        Raises:
            ExternalFetchError: If the source fails
        """
        if self._pull_request is None:
            get_logger().debug(f"Fetching pull request {self.owner}/{self.repo}#{self.number}")
            self._pull_request = self.source.fetch(self.owner, self.repo, self.number)
        return self._pull_request
