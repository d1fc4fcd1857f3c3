# AGPL-3.0 License

"""
End-to-end tests for the command line entry point.
"""

import pytest
from loguru import logger

from pr_gate import cli
from pr_gate.config_loader import new_settings
from pr_gate.git_providers.git_provider import PullRequestData, StaticPullRequestSource
from pr_gate.tools.reporter import EXIT_CONFIG_ERROR, EXIT_FAILURE, EXIT_SUCCESS


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # setup_logger binds the captured stderr of the current test
    logger.remove()


@pytest.fixture
def source(build_env):
    source = StaticPullRequestSource(data=PullRequestData(labels=("bug",), body="## Checklist\n- [x] tests\n"))
    build_env.setattr("pr_gate.tools.pr_checks.GithubProvider", lambda **kwargs: source)
    return source


class TestCli:

    def test_passing_run(self, build_env, source, capsys):
        build_env.setenv("PLUGIN_PREFIXES", "feat:")
        build_env.setenv("PLUGIN_SKIP_ON_LABELS", "skip-ci")
        build_env.setenv("PLUGIN_CHECKLIST", "true")

        assert cli.run([], settings=new_settings()) == EXIT_SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "✅ step=labels message=labels check passed",
            "✅ step=prefix message=prefixes check passed",
            "🦘 step=regexp message=no regexp to check",
            "✅ step=checklist message=checklist check passed",
        ]
        assert source.calls == [("octo", "gate", 7)]

    def test_failing_run(self, build_env, source, capsys):
        build_env.setenv("PLUGIN_PREFIXES", "chore:")

        assert cli.run([], settings=new_settings()) == EXIT_FAILURE
        assert "Found 1 errors" in capsys.readouterr().err

    def test_skip_label_run(self, build_env, source, capsys):
        build_env.setenv("PLUGIN_PREFIXES", "chore:")
        build_env.setenv("PLUGIN_SKIP_ON_LABELS", "bug")

        assert cli.run([], settings=new_settings()) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "🦘 step=labels message=skipping checks, skip label detected",
        ]

    def test_configuration_error(self, build_env, source, capsys):
        build_env.delenv("GITHUB_TOKEN")

        assert cli.run([], settings=new_settings()) == EXIT_CONFIG_ERROR
        assert capsys.readouterr().out == ""
        assert source.calls == []

    def test_log_format_override(self, build_env, source):
        assert cli.run(["--log-format", "JSON", "--log-level", "DEBUG"], settings=new_settings()) == EXIT_SUCCESS

    def test_numeric_title_checked_verbatim(self, build_env, source, capsys):
        build_env.setenv("DRONE_PULL_REQUEST_TITLE", "1.10")
        build_env.setenv("PLUGIN_REGEXP", r"^1\.10$")

        assert cli.run([], settings=new_settings()) == EXIT_SUCCESS
        assert "✅ step=regexp message=regular expression check passed" in capsys.readouterr().out.splitlines()
