"""Tests for the multi-select prompt."""

import logging

import pytest

from prdesc.models import OptionState
from prdesc.prompts import InputClosedError
from prdesc.selection import SelectionCodec

CATALOG = ["Bug fix", "New feature", "Breaking change", "Docs", "Others"]


def select(engine, *lines, options=CATALOG):
    prompts = engine(*lines)
    return SelectionCodec(prompts).select_multiple(options), prompts


def flags(states):
    return [s.selected for s in states]


class TestSelectMultiple:
    def test_single_choice(self, engine):
        states, _ = select(engine, "2")
        assert flags(states) == [False, True, False, False, False]
        assert [s.label for s in states] == CATALOG

    def test_several_choices_and_repeats(self, engine):
        states, _ = select(engine, "3 1 3 1")
        assert flags(states) == [True, False, True, False, False]

    @pytest.mark.parametrize("size", [1, 3, 12])
    def test_zero_selects_everything(self, engine, size):
        options = [f"option {i}" for i in range(size)]
        states, prompts = select(engine, "0", "unused", options=options)
        assert all(flags(states))
        assert all(s.detail == "" for s in states)
        # no follow-up question was asked
        assert prompts.read_line() == "unused"

    def test_zero_stops_token_processing(self, engine):
        states, prompts = select(engine, "0 abc 99", "unused")
        assert all(flags(states))
        assert prompts.read_line() == "unused"

    def test_others_asks_for_detail_once(self, engine):
        states, prompts = select(engine, "5 5", "Dependency bump", "unused")
        assert states[-1] == OptionState("Others", True, "Dependency bump")
        assert states[-1].display_label == "Others: Dependency bump"
        assert prompts.read_line() == "unused"

    def test_others_detail_is_required(self, engine):
        states, _ = select(engine, "5", "", "CI tweak")
        assert states[-1].detail == "CI tweak"

    def test_invalid_tokens_are_discarded(self, engine):
        states, prompts = select(engine, "x 99 -1 4")
        assert flags(states) == [False, False, False, True, False]
        shown = prompts.stream.getvalue()
        assert "Ignoring 'x': not a number." in shown
        assert "Ignoring '99': choose between 0 and 5." in shown
        assert "Ignoring '-1': not a number." in shown

    def test_out_of_range_only_reprompts(self, engine):
        states, prompts = select(engine, "99", "1")
        assert flags(states) == [True, False, False, False, False]
        assert "No selection made." in prompts.stream.getvalue()

    def test_feedback_does_not_depend_on_logging(self, engine):
        logging.disable(logging.CRITICAL)
        try:
            _, prompts = select(engine, "", "abc", "2")
        finally:
            logging.disable(logging.NOTSET)
        shown = prompts.stream.getvalue()
        assert shown.count("No selection made.") == 2
        assert "Ignoring 'abc': not a number." in shown

    def test_blank_line_reprompts(self, engine):
        states, _ = select(engine, "", "   ", "2")
        assert flags(states) == [False, True, False, False, False]

    def test_closed_input_raises(self, engine):
        with pytest.raises(InputClosedError):
            select(engine, "", "nope")

    def test_empty_catalog_is_rejected(self, engine):
        with pytest.raises(ValueError):
            select(engine, "1", options=[])
