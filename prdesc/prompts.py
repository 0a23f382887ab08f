"""
Line-oriented terminal prompts.

`PromptEngine` offers the four blocking input primitives used to collect
a pull-request description: yes/no questions, required single lines,
free-form multiline text closed by a terminator line, and multiline lists
closed by two consecutive blank lines.

Prompts are written to the status stream (stderr by default) so that
stdout stays free for the generated document.  Answers are read one line
at a time from stdin.  The streams are injectable, which is how the tests
drive the engine with `io.StringIO` objects.

End of input is treated as a terminator wherever an empty answer makes
sense (booleans fall back to their default, multiline prompts return what
was gathered so far).  Prompts that need an answer raise
`InputClosedError` instead of looping forever.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

logger = logging.getLogger(__name__)

TRUE_WORDS = ("yes", "y", "true", "1")
FALSE_WORDS = ("no", "n", "false", "0")


class InputClosedError(EOFError):
    """Raised when stdin closes while a required answer is still pending."""


def _require_question(question: str) -> None:
    if not question or not question.strip():
        raise ValueError("A question text is required.")


class PromptEngine:
    """Blocking prompts over a pair of text streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stream: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stream = stream if stream is not None else sys.stderr

    def say(self, text: str = "") -> None:
        """Write one line to the prompt stream."""
        self.stream.write(text + "\n")
        self.stream.flush()

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Show `prompt` (without newline) and return the next raw line.

        The trailing newline is removed.  Returns None at end of input.
        """
        if prompt:
            self.stream.write(prompt)
            self.stream.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def ask_boolean(
        self,
        question: str,
        default: bool = False,
        true_label: str = "yes",
        false_label: str = "no",
    ) -> bool:
        """Ask a yes/no question.

        The default answer is shown upper-cased, e.g. ``Include it? [yes/NO]:``.
        An empty answer (or end of input) returns `default`.  Only the words
        in TRUE_WORDS and FALSE_WORDS are recognized; the labels are for
        display, and anything else counts as False.
        """
        _require_question(question)
        if default:
            choices = f"{true_label.upper()}/{false_label.lower()}"
        else:
            choices = f"{true_label.lower()}/{false_label.upper()}"
        answer = self.read_line(f"{question} [{choices}]: ")
        if answer is None:
            self.say()
            logger.debug("Input closed on %r; using default %s", question, default)
            return default
        answer = answer.strip().lower()
        if not answer:
            return default
        if answer in TRUE_WORDS:
            return True
        if answer in FALSE_WORDS:
            return False
        logger.debug("Unrecognized answer %r to %r treated as False", answer, question)
        return False

    def ask_line(self, question: str) -> str:
        """Ask until a non-blank line is entered and return it stripped."""
        _require_question(question)
        while True:
            answer = self.read_line(f"{question}: ")
            if answer is None:
                self.say()
                raise InputClosedError(f"Input closed while waiting for: {question}")
            answer = answer.strip()
            if answer:
                return answer
            self.say("This field is required.")

    def ask_multiline_freeform(self, question: str, terminator: str = "EOF") -> str:
        """Read lines until one equals `terminator` exactly, or input ends."""
        _require_question(question)
        self.say(f"{question} (finish with a line containing only {terminator}):")
        lines: List[str] = []
        while True:
            line = self.read_line()
            if line is None or line == terminator:
                break
            lines.append(line)
        return "\n".join(lines)

    def ask_multiline_list(self, question: str) -> List[str]:
        """Read one entry per line until two consecutive blank lines.

        The first blank line of the closing pair is kept while reading and
        then dropped, together with any single trailing blank left when
        input ends early.
        """
        _require_question(question)
        self.say(f"{question} (one per line, finish with two empty lines):")
        entries: List[str] = []
        while True:
            line = self.read_line()
            if line is None:
                break
            if not line.strip() and entries and not entries[-1].strip():
                break
            entries.append(line)
        if entries and not entries[-1].strip():
            entries.pop()
        return entries
