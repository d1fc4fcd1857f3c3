# AGPL-3.0 License

from pr_gate.git_providers.git_provider import (
    PullRequestData,
    PullRequestSource,
    StaticPullRequestSource,
)
from pr_gate.git_providers.github_provider import GithubProvider

__all__ = [
    "PullRequestData",
    "PullRequestSource",
    "StaticPullRequestSource",
    "GithubProvider",
]
