# AGPL-3.0 License

"""
Policy settings for a single gate run.
"""

from dataclasses import dataclass


def split_csv(value: str) -> tuple[str, ...]:
    """
    Split a comma-separated setting.

    Entries are kept verbatim so that joining them with "," gives back
    the configured string. An empty string yields no entries.
    """
    if not value:
        return ()
    return tuple(value.split(","))


@dataclass(frozen=True)
class CheckSettings:
    """
    Immutable policy configuration for one run.

    Attributes:
        prefixes: Allowed title prefixes (empty = prefix check skipped)
        regexp: Pattern the title must match (empty = regexp check skipped)
        skip_on_labels: Labels that opt the PR out of all checks
        ignore_github_error: Downgrade fetch failures from error to skip
        checklist: Enable the checklist-completion check
        checklist_title: Heading that marks the checklist section
        title: The PR title under test
    """
    prefixes: tuple[str, ...] = ()
    regexp: str = ""
    skip_on_labels: tuple[str, ...] = ()
    ignore_github_error: bool = True
    checklist: bool = False
    checklist_title: str = "## Checklist"
    title: str = ""

    @classmethod
    def from_strings(
        cls,
        prefixes: str = "",
        regexp: str = "",
        skip_on_labels: str = "",
        ignore_github_error: bool = True,
        checklist: bool = False,
        checklist_title: str = "## Checklist",
        title: str = ""
    ) -> "CheckSettings":
        """Build settings from raw comma-separated values."""
        return cls(
            prefixes=split_csv(prefixes),
            regexp=regexp,
            skip_on_labels=split_csv(skip_on_labels),
            ignore_github_error=ignore_github_error,
            checklist=checklist,
            checklist_title=checklist_title,
            title=title,
        )
