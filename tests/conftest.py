"""Shared fixtures: prompt engines driven by scripted answers."""

import io
from typing import Callable

import pytest

from prdesc.prompts import PromptEngine


def scripted(*lines: str) -> io.StringIO:
    """Return a stdin replacement that yields `lines` and then closes."""
    return io.StringIO("".join(line + "\n" for line in lines))


@pytest.fixture
def engine() -> Callable[..., PromptEngine]:
    """Factory for a PromptEngine answering with the given lines."""

    def make(*lines: str) -> PromptEngine:
        return PromptEngine(stdin=scripted(*lines), stream=io.StringIO())

    return make
