# AGPL-3.0 License

"""
GitHub implementation of the pull request source.
"""

from typing import Optional

import requests
from github import Auth, BadCredentialsException, Github, GithubException

from pr_gate.errors import FetchAuthError, FetchDecodeError, FetchNetworkError
from pr_gate.git_providers.git_provider import PullRequestData, PullRequestSource
from pr_gate.log import get_logger

DEFAULT_GITHUB_API_URL = "https://api.github.com"


def _describe(e: GithubException) -> str:
    message = e.data.get("message") if isinstance(e.data, dict) else None
    return f"{e.status} {message or e.data or ''}".strip()


class GithubProvider(PullRequestSource):
    """
    Fetches pull request labels and body through the GitHub REST API.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_GITHUB_API_URL,
        github_client: Optional[Github] = None
    ):
        """
        Initialize the provider.

        Args:
            token: GitHub token used for authentication
            base_url: API base URL (GitHub Enterprise installs differ)
            github_client: Pre-built client, mainly for tests
        """
        self.base_url = base_url
        # PyGithub retries 5xx and waits out rate limits unless retry is None
        self.github_client = github_client or Github(auth=Auth.Token(token), base_url=base_url, retry=None)
        self.logger = get_logger()

    def fetch(self, owner: str, repo: str, number: int) -> PullRequestData:
        target = f"{owner}/{repo}#{number}"
        try:
            repository = self.github_client.get_repo(f"{owner}/{repo}", lazy=True)
            pull = repository.get_pull(number)
            labels = tuple(label.name for label in pull.labels)
            body = pull.body or ""
        except BadCredentialsException as e:
            raise FetchAuthError(f"GitHub rejected the token for {target}: {_describe(e)}") from e
        except GithubException as e:
            if e.status in (401, 403):
                raise FetchAuthError(f"Not authorized to read {target}: {_describe(e)}") from e
            raise FetchNetworkError(f"Failed to fetch {target}: {_describe(e)}") from e
        except requests.exceptions.RequestException as e:
            raise FetchNetworkError(f"Failed to reach {self.base_url}: {e}") from e
        except (ValueError, TypeError) as e:
            raise FetchDecodeError(f"Malformed pull request payload for {target}: {e}") from e

        self.logger.debug(f"Fetched {target} with {len(labels)} label(s)")
        return PullRequestData(labels=labels, body=body)
