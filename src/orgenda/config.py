"""Configuration management for orgenda."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.keywords import DEFAULT_KEYWORDS

logger = logging.getLogger(__name__)

ORGENDA_HOME = Path(os.environ.get("ORGENDA_HOME", Path.home() / "orgenda"))
CONFIG_FILE = ORGENDA_HOME / "config" / "orgenda.conf"


@dataclass
class Config:
    """orgenda configuration."""

    workspace_dir: str = ""
    todo_keywords: list[str] = field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    file_pattern: str = "*.org"
    recursive: bool = False
    watch_interval: float = 2.0

    @property
    def workspace_path(self) -> Path:
        """Workspace root; the current directory when unset."""
        if self.workspace_dir:
            return Path(self.workspace_dir).expanduser()
        return Path.cwd()


def _unquote(value: str) -> str:
    """Handle quoted values with inline comments: "value" # comment"""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from orgenda.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "workspace_dir":
                config.workspace_dir = value
            case "todo_keywords":
                # Comma or whitespace separated: "TODO,WAITING,DONE"
                keywords = [k for k in value.replace(",", " ").split() if k]
                if keywords:
                    config.todo_keywords = keywords
            case "file_pattern":
                config.file_pattern = value or config.file_pattern
            case "recursive":
                config.recursive = _parse_bool(key, value, config.recursive)
            case "watch_interval":
                try:
                    interval = float(value)
                except ValueError:
                    interval = 0.0
                if interval > 0:
                    config.watch_interval = interval
                else:
                    logger.warning(f"Invalid WATCH_INTERVAL: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
