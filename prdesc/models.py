"""
Data types shared by the prdesc collector, selector and renderer.

All records are frozen dataclasses: the collector builds them once at the
end of a session and the renderer only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class OptionState:
    """One entry of a multi-select answer.

    Attributes
    ----------
    label: str
        The catalog label, unchanged.

    selected: bool
        Whether the user picked this option.

    detail: str
        Free-text elaboration, only used by the catalog's last ("others")
        entry when it was picked explicitly.
    """

    label: str
    selected: bool = False
    detail: str = ""

    @property
    def display_label(self) -> str:
        if self.detail:
            return f"{self.label}: {self.detail}"
        return self.label


@dataclass(frozen=True)
class ChecklistItem:
    """A checklist catalog entry and the default answer offered for it."""

    label: str
    default: bool = False


@dataclass(frozen=True)
class CommitLink:
    """A commit on the current branch, with a web link when one is known."""

    sha: str
    subject: str
    url: str = ""

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


@dataclass(frozen=True)
class ChangeRecord:
    """Everything collected for one pull-request description."""

    title: str
    type_selections: Tuple[OptionState, ...]
    checklist: Tuple[bool, ...]
    motivation: str = ""
    description: str = ""
    todos: Tuple[str, ...] = field(default_factory=tuple)
    model_changes: Tuple[str, ...] = field(default_factory=tuple)
    testing_steps: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("ChangeRecord.title must not be empty.")
