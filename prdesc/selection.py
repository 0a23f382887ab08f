"""
Multi-select prompt for labeled option catalogs.

The user answers with whitespace-separated option numbers.  ``0`` picks
every option.  The catalog's last entry is the "others" slot: picking it
by number asks for a short free-text explanation, which is kept as the
option's detail.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from .models import OptionState
from .prompts import InputClosedError, PromptEngine

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[0-9]+")

SELECT_ALL = 0


class SelectionCodec:
    """Turns a line of option numbers into a list of `OptionState`."""

    def __init__(self, prompts: PromptEngine) -> None:
        self.prompts = prompts

    def _warn(self, message: str) -> None:
        # user feedback, independent of the log level
        self.prompts.say(message)
        logger.debug(message)

    def _parse(self, tokens: Sequence[str], count: int) -> tuple[List[bool], bool]:
        """Apply `tokens` to a fresh selection of `count` options.

        Returns the per-option flags and whether the "others" follow-up
        question is required.
        """
        flags = [False] * count
        wants_other = False
        for token in tokens:
            if not _NUMBER.fullmatch(token):
                self._warn(f"Ignoring '{token}': not a number.")
                continue
            index = int(token)
            if index == SELECT_ALL:
                flags = [True] * count
                break
            if index > count:
                self._warn(f"Ignoring '{token}': choose between 0 and {count}.")
                continue
            flags[index - 1] = True
            if index == count:
                wants_other = True
        return flags, wants_other

    def select_multiple(
        self,
        options: Sequence[str],
        question: str = "Select all that apply (space separated numbers)",
    ) -> List[OptionState]:
        if not options:
            raise ValueError("At least one option is required.")
        count = len(options)
        for number, label in enumerate(options, start=1):
            self.prompts.say(f"  {number}) {label}")
        self.prompts.say(f"  {SELECT_ALL}) All of the above")

        while True:
            line = self.prompts.read_line(f"{question}: ")
            if line is None:
                self.prompts.say()
                raise InputClosedError(f"Input closed while waiting for: {question}")
            tokens = line.split()
            if not tokens:
                self._warn("No selection made.")
                continue
            flags, wants_other = self._parse(tokens, count)
            if any(flags):
                break
            self._warn("No selection made.")

        detail = ""
        if wants_other:
            detail = self.prompts.ask_line(f"Please describe '{options[-1]}'")
        states = [OptionState(label, selected) for label, selected in zip(options, flags)]
        if detail:
            states[-1] = OptionState(options[-1], True, detail)
        return states
