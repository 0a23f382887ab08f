"""Tests for the question sequence."""

import io

import pytest

from prdesc.collector import RecordCollector
from prdesc.models import ChecklistItem, OptionState
from prdesc.prompts import PromptEngine
from prdesc.selection import SelectionCodec

TYPES = ["Bug fix", "New feature", "Others"]
CHECKLIST = [ChecklistItem("Self-reviewed", True), ChecklistItem("Tests added"), ChecklistItem("Docs updated")]


def collect(*lines):
    stream = io.StringIO()
    prompts = PromptEngine(stdin=io.StringIO("".join(line + "\n" for line in lines)), stream=stream)
    collector = RecordCollector(prompts, SelectionCodec(prompts), TYPES, CHECKLIST)
    return collector.collect(), stream.getvalue()


def test_declined_gates_skip_their_prompts():
    record, output = collect(
        "Fix login bug",  # title
        "2",  # types
        "n",  # motivation gate
        "EOF",  # description
        "n",  # todos gate
        "n",  # model changes gate
        "n",  # testing gate
        "",  # checklist 1 -> default True
        "",  # checklist 2 -> default False
        "",  # checklist 3 -> default False
    )
    assert record.title == "Fix login bug"
    assert record.type_selections == (
        OptionState("Bug fix"),
        OptionState("New feature", True),
        OptionState("Others"),
    )
    assert record.motivation == ""
    assert record.description == ""
    assert record.todos == record.model_changes == record.testing_steps == ()
    assert record.checklist == (True, False, False)
    assert "Motivation (finish" not in output
    assert "To-do before merge (one per line" not in output
    assert "Testing step (one per line" not in output


def test_every_field_filled_in():
    record, _ = collect(
        "Add export",
        "1 3",
        "Support CSV",
        "y",
        "Users asked for it.",
        "Second line.",
        "EOF",
        "Adds an export button.",
        "EOF",
        "y",
        "Update changelog",
        "",
        "",
        "y",
        "Report gains a format column",
        "",
        "",
        "yes",
        "Open the report",
        "",
        "Click export",
        "",
        "",
        "n",
        "y",
        "1",
    )
    assert record.type_selections[0].selected
    assert record.type_selections[2] == OptionState("Others", True, "Support CSV")
    assert record.motivation == "Users asked for it.\nSecond line."
    assert record.description == "Adds an export button."
    assert record.todos == ("Update changelog",)
    assert record.model_changes == ("Report gains a format column",)
    assert record.testing_steps == ("Open the report", "", "Click export")
    assert record.checklist == (False, True, True)


def test_record_is_immutable():
    record, _ = collect("T", "1", "n", "EOF", "n", "n", "n", "", "", "")
    with pytest.raises(AttributeError):
        record.title = "other"
