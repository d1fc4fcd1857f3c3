# AGPL-3.0 License

import argparse
import sys
from typing import Optional

from dynaconf import Dynaconf

from pr_gate.config_loader import load_config
from pr_gate.errors import ConfigurationError
from pr_gate.log import LoggingFormat, get_logger, setup_logger
from pr_gate.tools.pr_checks import PRChecks
from pr_gate.tools.reporter import EXIT_CONFIG_ERROR


def set_parser():
    parser = argparse.ArgumentParser(
        description="Pull request gate for CI pipelines.",
        usage="""\
Run the gate with settings from the environment:
> pr-gate

Settings:
PLUGIN_PREFIXES             Comma-separated allowed title prefixes
PLUGIN_REGEXP               Regular expression the title must match
PLUGIN_SKIP_ON_LABELS       Comma-separated labels that skip all checks
PLUGIN_IGNORE_GITHUB_ERROR  Treat GitHub API failures as skipped checks (default: true)
PLUGIN_CHECKLIST            Require the description checklist to be completed (default: false)
PLUGIN_CHECKLIST_TITLE      Heading of the checklist section (default: "## Checklist")
DRONE_PULL_REQUEST_TITLE, DRONE_REPO_OWNER, DRONE_REPO_NAME, DRONE_PULL_REQUEST, GITHUB_TOKEN
""",
    )
    parser.add_argument("--log-level", default=None, help="Override PLUGIN_LOG_LEVEL")
    parser.add_argument(
        "--log-format",
        default=None,
        choices=[f.value for f in LoggingFormat],
        help="Override PLUGIN_LOG_FORMAT",
    )
    return parser


def run(argv: Optional[list[str]] = None, settings: Optional[Dynaconf] = None) -> int:
    """
    Load configuration, run the gate and return the exit code.

    Configuration problems are reported before any check runs.
    """
    args = set_parser().parse_args(argv)

    try:
        config = load_config(settings)
    except ConfigurationError as e:
        setup_logger(args.log_level or "INFO")
        get_logger().error(str(e))
        return EXIT_CONFIG_ERROR

    log_format = LoggingFormat(args.log_format) if args.log_format else config.log_format
    setup_logger(args.log_level or config.log_level, log_format)

    try:
        return PRChecks(config).run()
    except ConfigurationError as e:
        get_logger().error(str(e))
        return EXIT_CONFIG_ERROR


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
