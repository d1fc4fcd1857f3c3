# AGPL-3.0 License

"""
Pull request data source interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from pr_gate.errors import ExternalFetchError


@dataclass(frozen=True)
class PullRequestData:
    """
    The parts of a pull request the gate needs.
    """
    labels: tuple[str, ...] = ()
    body: str = ""


class PullRequestSource(ABC):
    """
    Abstract capability for fetching pull request data.

    Implementations raise a subclass of ExternalFetchError on transport,
    authentication or decoding failures.
    """

    @abstractmethod
    def fetch(self, owner: str, repo: str, number: int) -> PullRequestData:
        """
        Fetch labels and body of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Pull request number

        Returns:
            PullRequestData for the pull request
        """
        pass


@dataclass
class StaticPullRequestSource(PullRequestSource):
    """
    In-memory source returning fixed data, or failing with a fixed error.

    Records every call so callers can assert how often data was fetched.
    """
    data: PullRequestData = field(default_factory=PullRequestData)
    error: Optional[ExternalFetchError] = None
    calls: list[tuple[str, str, int]] = field(default_factory=list)

    def fetch(self, owner: str, repo: str, number: int) -> PullRequestData:
        self.calls.append((owner, repo, number))
        if self.error is not None:
            raise self.error
        return self.data
