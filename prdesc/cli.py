"""
Entry point for the prdesc command-line interface (exposed as `prdesc`).

The prdesc CLI walks the user through a fixed series of questions about
the change on the current branch and writes the answers as a Markdown
pull-request description named ``<epoch>-<identity>-<branch>.md``.

Usage examples::

    # Answer the questions and write the document in the current directory
    prdesc
    # (equivalent during development)
    # python -m prdesc.cli

    # Write to another directory and append links to the branch commits
    prdesc --output-dir docs/pr --commits --base develop

    # Also print the finished document on stdout
    prdesc --stdout

Prompts go to stderr; stdout only receives the path of the written file
(and the document itself with --stdout), so the output can be piped.

The generated document follows this section order:
1) Title, 2) Motivation, 3) Description, 4) Type of change,
5) To-do before merge, 6) Changes to existing models,
7) Testing Instructions, 8) Checklist, 9) Commits (with --commits).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .collector import RecordCollector
from .config import PrdescConfig
from .document import render
from .prompts import InputClosedError, PromptEngine
from .selection import SelectionCodec
from .vcs import commit_links, current_branch, document_filename, user_identity


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactively write a pull-request description.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write the document to (default: config 'output_dir', env PRDESC_OUTPUT_DIR, or '.').",
    )
    parser.add_argument(
        "--base",
        type=str,
        default=None,
        help="Base branch for the commit list (default: config 'base_branch' or 'main').",
    )
    parser.add_argument(
        "--commits",
        action="store_true",
        help="Append a Commits section listing the commits since the base branch.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print the finished document on stdout.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.environ.get("PRDESC_LOGLEVEL", "WARNING").upper(),
        help="Logging verbosity (default from env PRDESC_LOGLEVEL or WARNING).",
    )
    return parser


def write_document(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("x", encoding="utf-8") as f:
        f.write(text)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Primary CLI entry point.

    Parses arguments, runs the question session, renders the document
    and writes it to disk.  Returns an exit code.  The streams default to
    the process streams and are only overridden by tests.
    """
    args = build_parser().parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout

    level = getattr(logging, (args.log_level or "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s %(name)s:%(lineno)d - %(message)s",
    )
    logging.getLogger().setLevel(level)
    logger = logging.getLogger("prdesc.cli")

    root = Path.cwd()
    config = PrdescConfig.load(root)
    logger.info("Loaded configuration from %s", config.config_path or "defaults")

    output_dir = args.output_dir if args.output_dir is not None else config.output_dir
    base = args.base or config.base_branch

    prompts = PromptEngine(stdin=stdin, stream=stderr)
    collector = RecordCollector(
        prompts=prompts,
        selector=SelectionCodec(prompts),
        type_options=config.types_of_change,
        checklist=config.checklist,
    )
    try:
        record = collector.collect()
    except InputClosedError as exc:
        logger.error("%s. No document was written.", exc)
        return 1
    except KeyboardInterrupt:
        prompts.say()
        logger.error("Interrupted. No document was written.")
        return 130

    commits = commit_links(root, base, config.repository_url) if args.commits else []
    text = render(record, config.checklist, commits)

    path = output_dir / document_filename(user_identity(root), current_branch(root))
    try:
        write_document(path, text)
    except FileExistsError as exc:
        if path.is_file():
            logger.error("%s already exists; not overwriting it.", path)
        else:
            logger.error("Failed to write %s: %s", path, exc)
        return 1
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        return 1
    logger.info("Description written to %s", path.resolve())

    if args.stdout:
        stdout.write(text)
    stdout.write(f"{path}\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
