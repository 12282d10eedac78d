"""User configuration and syntax rule files.

Everything lives under one per-user directory, ``~/.config/termedit`` by
default (override with ``TERMEDIT_CONFIG_DIR``)::

    ~/.config/termedit/
        settings.json       optional, see Settings
        termedit.log        default log file
        syntax/go.json      rules for *.go files
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from termedit.core.highlight import RuleSet
from termedit.errors import RuleFileError

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "TERMEDIT_CONFIG_DIR"


def config_dir() -> Path:
    """Get the configuration directory from the environment or the default."""
    if env_path := os.environ.get(CONFIG_DIR_ENV):
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "termedit"


@dataclass
class Settings:
    """Editor settings read from settings.json."""
    log_level: str = "INFO"
    log_file: Path = field(default_factory=lambda: config_dir() / "termedit.log")
    syntax_dir: Path = field(default_factory=lambda: config_dir() / "syntax")

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """
        Load settings, falling back to defaults.

        A missing or unreadable file is not an error; unknown keys are
        ignored.
        """
        path = path or config_dir() / "settings.json"
        settings = cls()
        if not path.exists():
            return settings
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            return settings
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected an object", path)
            return settings

        if isinstance(data.get("log_level"), str):
            settings.log_level = data["log_level"].upper()
        if isinstance(data.get("log_file"), str):
            settings.log_file = Path(data["log_file"]).expanduser()
        if isinstance(data.get("syntax_dir"), str):
            settings.syntax_dir = Path(data["syntax_dir"]).expanduser()
        return settings


def rule_file_for(extension: str, syntax_dir: Path) -> Path | None:
    """Map a file extension such as '.go' to its rule file path."""
    name = extension.lstrip(".").lower()
    if not name:
        return None
    return syntax_dir / f"{name}.json"


def read_rules(path: Path) -> RuleSet:
    """Parse one rule file. Raises RuleFileError if it is malformed."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return RuleSet.from_dict(data, name=path.stem)
    except (OSError, ValueError) as e:
        raise RuleFileError(f"{path}: {e}") from e


def load_rules(extension: str, syntax_dir: Path | None = None) -> RuleSet | None:
    """
    Find the rule set for a file extension.

    Returns None when there is no rule file or it cannot be used; missing
    rules only mean plain highlighting.
    """
    path = rule_file_for(extension, syntax_dir or Settings().syntax_dir)
    if path is None or not path.is_file():
        logger.debug("No syntax rules for extension %r", extension)
        return None
    try:
        rules = read_rules(path)
    except RuleFileError as e:
        logger.warning("Ignoring syntax rules: %s", e)
        return None
    logger.info("Loaded syntax rules from %s", path)
    return rules
