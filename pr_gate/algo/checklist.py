# AGPL-3.0 License

"""
Markdown checklist extraction.

A checklist section is the first contiguous run of task-list lines
(``- [ ] text`` or ``- [x] text``) that follows the checklist heading.
"""

import re
from dataclasses import dataclass

# Only a lowercase "x" marks an item as checked; "- [X]" is not an item.
CHECKLIST_ITEM_PATTERN = re.compile(r"^\s*- \[([ x])\] (.+)$")


@dataclass(frozen=True)
class ChecklistItem:
    text: str
    checked: bool


def parse_checklist_item(line: str):
    """Return a ChecklistItem for a task-list line, or None."""
    match = CHECKLIST_ITEM_PATTERN.match(line)
    if not match:
        return None
    return ChecklistItem(text=match.group(2), checked=match.group(1) == "x")


def extract_checklist(body: str, title: str) -> list[ChecklistItem]:
    """
    Extract the checklist section that follows ``title`` in ``body``.

    Lines after the first occurrence of the title are skipped until the
    first checklist item; from there, items are collected until a line
    breaks the run (blank line, other content) or the text ends.

    Args:
        body: Markdown text, usually the PR description
        title: Heading that marks the checklist section

    Returns:
        Items of the section, empty if the title or items are missing
    """
    if not body or not title:
        return []

    start = body.find(title)
    if start == -1:
        return []

    items = []
    for line in body[start + len(title):].splitlines():
        item = parse_checklist_item(line)
        if item is not None:
            items.append(item)
        elif items:
            break

    return items


def count_unchecked(items: list[ChecklistItem]) -> int:
    return sum(1 for item in items if not item.checked)
