"""Configuration management for jotbook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

JOTBOOK_HOME = Path(os.environ.get("JOTBOOK_HOME", Path.home() / "jotbook"))
CONFIG_FILE = JOTBOOK_HOME / "jotbook.conf"
DEFAULT_JOURNAL_FILE = JOTBOOK_HOME / "journal.txt"

TRUE_VALUES = {"true", "yes", "1", "on"}


@dataclass
class Config:
    """jotbook configuration."""

    journal_file: str = ""
    separator: str = "-----"
    strict_separator: bool = False
    export_dir: str = ""

    @property
    def journal_path(self) -> Path:
        """Resolve the journal file, falling back to JOTBOOK_HOME/journal.txt."""
        if self.journal_file:
            return Path(self.journal_file).expanduser()
        return DEFAULT_JOURNAL_FILE

    def export_path(self, name: str | Path) -> Path:
        """Resolve an export target. Relative names go under export_dir if set."""
        path = Path(name).expanduser()
        if self.export_dir and not path.is_absolute():
            return Path(self.export_dir).expanduser() / path
        return path


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from jotbook.conf file."""
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
            case "journal_file":
                config.journal_file = value
            case "separator":
                if value:
                    config.separator = value
                else:
                    logger.warning("Ignoring empty SEPARATOR in config")
            case "strict_separator":
                config.strict_separator = value.lower() in TRUE_VALUES
            case "export_dir":
                config.export_dir = value
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config
