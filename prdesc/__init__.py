"""
prdesc package.

This package provides a command-line interface (CLI) that interviews the
author of a change and writes a Markdown pull-request description.  The
resulting document includes:

* The title and the types of change that apply.
* Optional motivation, description, to-do, model-change and testing
  sections, present only when the author filled them in.
* The team checklist, rendered as checkboxes.
* Optionally, links to the commits on the current branch.

Each component handles a single responsibility: `prompts` reads answers,
`selection` parses multi-select answers, `collector` runs the question
sequence, `document` renders the record and `vcs` talks to git.

See `cli.py` for the entry point.
"""

__all__ = [
    "cli",
]
