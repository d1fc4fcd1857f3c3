# AGPL-3.0 License

"""
Shared fixtures for PR Gate unit tests.
"""

import pytest

GATE_ENV_VARS = [
    "PLUGIN_PREFIXES",
    "PLUGIN_REGEXP",
    "PLUGIN_SKIP_ON_LABELS",
    "PLUGIN_IGNORE_GITHUB_ERROR",
    "PLUGIN_CHECKLIST",
    "PLUGIN_CHECKLIST_TITLE",
    "PLUGIN_GITHUB_API_URL",
    "PLUGIN_LOG_LEVEL",
    "PLUGIN_LOG_FORMAT",
    "DRONE_PULL_REQUEST_TITLE",
    "DRONE_REPO_OWNER",
    "DRONE_REPO_NAME",
    "DRONE_PULL_REQUEST",
    "GITHUB_TOKEN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every gate setting from the environment."""
    for name in GATE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def build_env(clean_env):
    """Environment of a Drone pull request build with only required settings."""
    clean_env.setenv("DRONE_PULL_REQUEST_TITLE", "feat: add a new feature")
    clean_env.setenv("DRONE_REPO_OWNER", "octo")
    clean_env.setenv("DRONE_REPO_NAME", "gate")
    clean_env.setenv("DRONE_PULL_REQUEST", "7")
    clean_env.setenv("GITHUB_TOKEN", "ghp_testtoken")
    return clean_env
