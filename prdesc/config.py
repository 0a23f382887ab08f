"""
Configuration management for the prdesc CLI.

This module centralizes loading of configuration values from environment
variables and an optional JSON configuration file.  It defines the
default catalogs and provides an interface for the rest of the
application to query these settings.

The configuration file `prdesc_config.json` lets a team replace the
"type of change" options and the checklist, and choose where documents
are written.  For example::

    {
      "types_of_change": ["Bug fix", "New feature", "Others"],
      "checklist": [
        {"label": "I have performed a self-review of my own code", "default": true},
        {"label": "I have added tests", "default": false}
      ],
      "output_dir": "docs/pr",
      "base_branch": "develop"
    }

The last type of change is always the "others" slot that asks for a free
text explanation when picked.  If the configuration file is absent or
invalid, the defaults below are used.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .models import ChecklistItem

logger = logging.getLogger(__name__)

CONFIG_FILE = "prdesc_config.json"

DEFAULT_TYPES_OF_CHANGE: Tuple[str, ...] = (
    "Bug fix (non-breaking change which fixes an issue)",
    "New feature (non-breaking change which adds functionality)",
    "Breaking change (fix or feature that would cause existing functionality to not work as expected)",
    "Refactoring (no functional changes)",
    "Documentation update",
    "Others",
)

DEFAULT_CHECKLIST: Tuple[ChecklistItem, ...] = (
    ChecklistItem("My code follows the style guidelines of this project", True),
    ChecklistItem("I have performed a self-review of my own code"),
    ChecklistItem("I have commented my code, particularly in hard-to-understand areas"),
    ChecklistItem("I have made corresponding changes to the documentation"),
    ChecklistItem("I have added tests that prove my fix is effective or that my feature works"),
    ChecklistItem("New and existing unit tests pass locally with my changes"),
)


@dataclass
class PrdescConfig:
    """Top-level configuration for the prdesc CLI.

    Attributes
    ----------
    types_of_change: List[str]
        Ordered change-type labels offered in the multi-select prompt.
        The last entry is the "others" slot.

    checklist: List[ChecklistItem]
        Ordered checklist items, each asked as a yes/no question.

    output_dir: Path
        Directory where the generated document is written.  The
        `PRDESC_OUTPUT_DIR` environment variable overrides the file.

    base_branch: str
        Branch the current work is compared against when listing commits.

    repository_url: str | None
        Web URL of the repository used for commit links.  When unset it
        is derived from the `origin` remote.

    config_path: Path | None
        Path to the configuration file this object was loaded from.
        Retained for logging and debugging purposes.
    """

    types_of_change: List[str] = field(default_factory=lambda: list(DEFAULT_TYPES_OF_CHANGE))
    checklist: List[ChecklistItem] = field(default_factory=lambda: list(DEFAULT_CHECKLIST))
    output_dir: Path = Path(".")
    base_branch: str = "main"
    repository_url: str | None = None
    config_path: Path | None = None

    @staticmethod
    def _parse_types(value: Any) -> List[str]:
        if not isinstance(value, list) or not value or not all(isinstance(v, str) and v.strip() for v in value):
            raise ValueError("'types_of_change' must be a non-empty list of labels")
        return [v.strip() for v in value]

    @staticmethod
    def _parse_checklist(value: Any) -> List[ChecklistItem]:
        if not isinstance(value, list) or not value:
            raise ValueError("'checklist' must be a non-empty list")
        items: List[ChecklistItem] = []
        for entry in value:
            if isinstance(entry, str):
                items.append(ChecklistItem(entry))
            elif isinstance(entry, dict) and isinstance(entry.get("label"), str):
                items.append(ChecklistItem(entry["label"], bool(entry.get("default", False))))
            else:
                raise ValueError(f"invalid checklist entry: {entry!r}")
        return items

    @staticmethod
    def load(base_dir: Path) -> "PrdescConfig":
        """Load configuration values from `prdesc_config.json` and the
        environment.

        Parameters
        ----------
        base_dir: Path
            The directory where the CLI command is being executed.  This
            directory is scanned for a `prdesc_config.json` file.

        Returns
        -------
        PrdescConfig
            A populated configuration object.
        """
        config = PrdescConfig()
        config_path = base_dir / CONFIG_FILE
        if config_path.exists():
            try:
                with config_path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level value must be an object")
                if "types_of_change" in data:
                    config.types_of_change = PrdescConfig._parse_types(data["types_of_change"])
                if "checklist" in data:
                    config.checklist = PrdescConfig._parse_checklist(data["checklist"])
                if data.get("output_dir"):
                    config.output_dir = Path(data["output_dir"])
                if data.get("base_branch"):
                    config.base_branch = str(data["base_branch"])
                if data.get("repository_url"):
                    config.repository_url = str(data["repository_url"]).rstrip("/")
                config.config_path = config_path
            except (OSError, ValueError) as exc:
                # json.JSONDecodeError is a ValueError
                logger.warning("Failed to parse %s (%s); using defaults.", config_path, exc)
                config = PrdescConfig()

        env_output: Optional[str] = os.environ.get("PRDESC_OUTPUT_DIR")
        if env_output:
            config.output_dir = Path(env_output)
        return config
