"""
Question sequence that fills in a `ChangeRecord`.

The order is fixed: title, types of change, motivation, description,
to-dos, model changes, testing instructions and finally the checklist.
Optional fields sit behind a yes/no gate; a declined gate skips the
field's prompt entirely.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .models import ChangeRecord, ChecklistItem
from .prompts import PromptEngine
from .selection import SelectionCodec

logger = logging.getLogger(__name__)


class RecordCollector:
    """Runs the interactive session for one pull-request description."""

    def __init__(
        self,
        prompts: PromptEngine,
        selector: SelectionCodec,
        type_options: Sequence[str],
        checklist: Sequence[ChecklistItem],
    ) -> None:
        self.prompts = prompts
        self.selector = selector
        self.type_options = list(type_options)
        self.checklist = list(checklist)

    def _gated_list(self, gate: str, question: str) -> List[str]:
        if not self.prompts.ask_boolean(gate):
            return []
        return self.prompts.ask_multiline_list(question)

    def collect(self) -> ChangeRecord:
        title = self.prompts.ask_line("Title")

        self.prompts.say("Type of change:")
        types = self.selector.select_multiple(self.type_options)

        motivation = ""
        if self.prompts.ask_boolean("Do you want to include a motivation?"):
            motivation = self.prompts.ask_multiline_freeform("Motivation")

        description = self.prompts.ask_multiline_freeform("Description")

        todos = self._gated_list("Do you want to include a to-do list before merge?", "To-do before merge")
        model_changes = self._gated_list(
            "Do you want to include changes to existing models?", "Changes to existing models"
        )
        testing_steps = self._gated_list("Do you want to include testing instructions?", "Testing step")

        self.prompts.say("Checklist:")
        answers = tuple(self.prompts.ask_boolean(item.label, default=item.default) for item in self.checklist)

        logger.info("Collected record %r with %d selected change types", title, sum(s.selected for s in types))
        return ChangeRecord(
            title=title,
            type_selections=tuple(types),
            checklist=answers,
            motivation=motivation,
            description=description,
            todos=tuple(todos),
            model_changes=tuple(model_changes),
            testing_steps=tuple(testing_steps),
        )
