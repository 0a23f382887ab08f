"""
Markdown rendering of a collected `ChangeRecord`.

`render` is pure: it only returns the document text.  The section order
is fixed; optional sections are left out when their field is empty:

1) Title, 2) Motivation, 3) Description, 4) Type of change,
5) To-do before merge, 6) Changes to existing models,
7) Testing Instructions, 8) Checklist, 9) Commits.

Each heading and each block of section content is followed by exactly
one blank line.  Review tools parse the ``## <Heading>`` markers and the
``- [x] `` / ``- [ ] `` checkbox lines, so both are emitted verbatim.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import DEFAULT_CHECKLIST
from .models import ChangeRecord, ChecklistItem, CommitLink

TITLE = "Title"
MOTIVATION = "Motivation"
DESCRIPTION = "Description"
TYPE_OF_CHANGE = "Type of change (Check all that apply)"
TODO = "To-do before merge"
MODEL_CHANGES = "Changes to existing models:"
TESTING = "Testing Instructions"
CHECKLIST = "Checklist"
COMMITS = "Commits"


def checkbox(checked: bool, label: str) -> str:
    return f"- [{'x' if checked else ' '}] {label}"


def hard_breaks(text: str) -> List[str]:
    """Suffix every line with two spaces (Markdown hard line break)."""
    return [line + "  " for line in text.split("\n")]


def numbered(entries: Iterable[str]) -> List[str]:
    """Number non-blank entries from 1; blank entries are dropped."""
    lines: List[str] = []
    for entry in entries:
        if entry.strip():
            lines.append(f"{len(lines) + 1}. {entry}")
    return lines


def _section(heading: str, body: Sequence[str]) -> str:
    return f"## {heading}\n\n" + "".join(line + "\n" for line in body) + "\n"


def render(
    record: ChangeRecord,
    checklist: Sequence[ChecklistItem] = DEFAULT_CHECKLIST,
    commits: Sequence[CommitLink] = (),
) -> str:
    """Assemble the pull-request description for `record`."""
    if len(checklist) != len(record.checklist):
        raise ValueError(
            f"Checklist catalog has {len(checklist)} items but the record has {len(record.checklist)} answers."
        )
    parts: List[str] = [_section(TITLE, [record.title])]
    if record.motivation:
        parts.append(_section(MOTIVATION, hard_breaks(record.motivation)))
    if record.description:
        parts.append(_section(DESCRIPTION, hard_breaks(record.description)))
    parts.append(_section(TYPE_OF_CHANGE, [checkbox(s.selected, s.display_label) for s in record.type_selections]))
    if record.todos:
        parts.append(_section(TODO, [checkbox(False, entry) for entry in record.todos]))
    if record.model_changes:
        parts.append(_section(MODEL_CHANGES, [f"- {entry}" for entry in record.model_changes]))
    if record.testing_steps:
        parts.append(_section(TESTING, numbered(record.testing_steps)))
    parts.append(
        _section(CHECKLIST, [checkbox(flag, item.label) for item, flag in zip(checklist, record.checklist)])
    )
    if commits:
        lines = []
        for commit in commits:
            ref = f"[{commit.short_sha}]({commit.url})" if commit.url else commit.short_sha
            lines.append(f"- {ref} {commit.subject}")
        parts.append(_section(COMMITS, lines))
    return "".join(parts)
