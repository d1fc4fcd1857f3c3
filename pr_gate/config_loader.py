# AGPL-3.0 License

"""
Configuration loading and validation.

Settings come from `settings/configuration.toml` and are overridden by
environment variables of the same name (the Drone plugin convention:
PLUGIN_* for plugin options, DRONE_* for build metadata).

Dynaconf only loads the typed keys (booleans, the PR number, log settings).
Free-text keys such as the PR title or the title pattern are read verbatim
from the environment, so Dynaconf never parses them as TOML.
"""

import os
import re
from dataclasses import dataclass
from os.path import abspath, dirname, join
from typing import Any, Dict, List, Mapping, Optional

from dynaconf import Dynaconf, DynaconfFormatError, DynaconfParseError, ValidationError, Validator

from pr_gate.checks.check_settings import CheckSettings
from pr_gate.errors import ConfigurationError
from pr_gate.log import LoggingFormat

current_dir = dirname(abspath(__file__))

TRUE_VALUES = ("1", "t", "true", "y", "yes", "on")
FALSE_VALUES = ("0", "f", "false", "n", "no", "off", "")

TEXT_SETTINGS = (
    "PLUGIN_PREFIXES",
    "PLUGIN_REGEXP",
    "PLUGIN_SKIP_ON_LABELS",
    "PLUGIN_CHECKLIST_TITLE",
    "PLUGIN_GITHUB_API_URL",
    "DRONE_PULL_REQUEST_TITLE",
    "DRONE_REPO_OWNER",
    "DRONE_REPO_NAME",
    "GITHUB_TOKEN",
)
NON_EMPTY_TEXT_SETTINGS = (
    "DRONE_REPO_OWNER",
    "DRONE_REPO_NAME",
    "GITHUB_TOKEN",
    "PLUGIN_CHECKLIST_TITLE",
    "PLUGIN_GITHUB_API_URL",
)


def _is_valid_pattern(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


def _is_bool_like(value: Any) -> bool:
    return isinstance(value, bool) or str(value).strip().lower() in TRUE_VALUES + FALSE_VALUES


def _is_log_format(value: Any) -> bool:
    return str(value).upper() in [f.value for f in LoggingFormat]


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES


VALIDATORS = [
    Validator(
        "DRONE_PULL_REQUEST",
        is_type_of=int,
        gt=0,
        messages={"operations": "{name} is required (pull request number > 0), got {value}"},
    ),
    Validator(
        "PLUGIN_IGNORE_GITHUB_ERROR", "PLUGIN_CHECKLIST",
        condition=_is_bool_like,
        messages={"condition": "{name} must be a boolean, got {value}"},
    ),
    Validator(
        "PLUGIN_LOG_FORMAT",
        condition=_is_log_format,
        messages={"condition": "{name} must be one of CONSOLE, JSON, got {value}"},
    ),
]


def new_settings() -> Dynaconf:
    """
    Build a fresh settings object from the defaults and the environment.

    Raises:
        ConfigurationError: If a typed environment value cannot be parsed
    """
    settings = Dynaconf(
        envvar_prefix=False,
        ignore_unknown_envvars=True,
        merge_enabled=True,
        settings_files=[join(current_dir, "settings", "configuration.toml")],
    )
    try:
        # First access loads the settings files and the environment.
        settings.validators.register(*VALIDATORS)
    except (DynaconfFormatError, DynaconfParseError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration:\n{e}") from e
    return settings


global_settings: Optional[Dynaconf] = None


def get_settings() -> Dynaconf:
    global global_settings
    if global_settings is None:
        global_settings = new_settings()
    return global_settings


def read_text_settings(settings: Dynaconf, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Optional[str]]:
    """
    Read the free-text settings, falling back to the `[text_settings]` defaults.

    Returns:
        Setting name to raw value; None when neither is set
    """
    if environ is None:
        environ = os.environ
    defaults = {str(key).upper(): str(value) for key, value in settings.get("TEXT_SETTINGS", {}).items()}
    return {name: environ.get(name, defaults.get(name)) for name in TEXT_SETTINGS}


def _validate_text_settings(text: Dict[str, Optional[str]]) -> List[str]:
    errors = []
    if text["DRONE_PULL_REQUEST_TITLE"] is None:
        errors.append("DRONE_PULL_REQUEST_TITLE is required (pull request title)")
    for name in NON_EMPTY_TEXT_SETTINGS:
        if not text[name]:
            errors.append(f"{name} is required")
    if not _is_valid_pattern(text["PLUGIN_REGEXP"] or ""):
        errors.append(f"PLUGIN_REGEXP is not a valid regular expression: {text['PLUGIN_REGEXP']}")
    return errors


@dataclass(frozen=True)
class GithubSettings:
    """
    Connection settings for the pull request source.
    """
    token: str
    owner: str
    repo: str
    pull_request: int
    api_url: str


@dataclass(frozen=True)
class GateConfig:
    """
    Fully validated configuration for one run.
    """
    checks: CheckSettings
    github: GithubSettings
    log_level: str = "INFO"
    log_format: LoggingFormat = LoggingFormat.CONSOLE


def load_config(settings: Optional[Dynaconf] = None, environ: Optional[Mapping[str, str]] = None) -> GateConfig:
    """
    Validate settings and build the run configuration.

    Args:
        settings: Settings to read; defaults to the global settings
        environ: Source of the free-text settings; defaults to os.environ

    Returns:
        GateConfig with typed values

    Raises:
        ConfigurationError: If any setting is invalid; all failures are reported
    """
    if settings is None:
        settings = get_settings()

    errors = []
    try:
        settings.validators.validate_all()
    except ValidationError as e:
        errors.append(str(e))
    text = read_text_settings(settings, environ)
    errors.extend(_validate_text_settings(text))
    if errors:
        raise ConfigurationError("Invalid configuration:\n" + "\n".join(errors))

    checks = CheckSettings.from_strings(
        prefixes=text["PLUGIN_PREFIXES"] or "",
        regexp=text["PLUGIN_REGEXP"] or "",
        skip_on_labels=text["PLUGIN_SKIP_ON_LABELS"] or "",
        ignore_github_error=_as_bool(settings.get("PLUGIN_IGNORE_GITHUB_ERROR")),
        checklist=_as_bool(settings.get("PLUGIN_CHECKLIST")),
        checklist_title=text["PLUGIN_CHECKLIST_TITLE"],
        title=text["DRONE_PULL_REQUEST_TITLE"],
    )
    github = GithubSettings(
        token=text["GITHUB_TOKEN"],
        owner=text["DRONE_REPO_OWNER"],
        repo=text["DRONE_REPO_NAME"],
        pull_request=int(settings.get("DRONE_PULL_REQUEST")),
        api_url=text["PLUGIN_GITHUB_API_URL"],
    )

    return GateConfig(
        checks=checks,
        github=github,
        log_level=str(settings.get("PLUGIN_LOG_LEVEL") or "INFO"),
        log_format=LoggingFormat(str(settings.get("PLUGIN_LOG_FORMAT")).upper() or "CONSOLE"),
    )
