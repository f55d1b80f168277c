"""Optional user configuration from ~/.crane/config.toml."""

import os
import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from crane import display

CONFIG_DIR = ".crane"
CONFIG_FILE = "config.toml"

# File key for each Config field
KEYS: dict[str, str] = {
    "modal": "Modal",
}


class ConfigError(ValueError):
    """A recognized key holds a value of the wrong type."""


@dataclass
class Config:
    modal: bool = False

    def as_dict(self) -> dict:
        return asdict(self)


def resolve_home() -> Path | None:
    """Return the current user's home directory, or None if it can't be determined."""
    # Path.home() maps an empty HOME to "/"
    if os.environ.get("HOME") == "":
        return None
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    if str(home) in (".", "~"):
        return None
    return home


def config_path(home: Path) -> Path:
    return home / CONFIG_DIR / CONFIG_FILE


def _lookup(data: dict, key: str) -> tuple[bool, object]:
    """Find a key by exact name first, then case-insensitively."""
    if key in data:
        return True, data[key]
    folded = key.lower()
    for name, value in data.items():
        if name.lower() == folded:
            return True, value
    return False, None


def decode(data: dict, config: Config) -> Config:
    """Assign recognized keys from parsed TOML onto config, field by field.

    Unknown keys are ignored. Raises ConfigError on the first value whose type
    doesn't match its field; fields assigned before that keep their new values.
    """
    for field in fields(config):
        key = KEYS[field.name]
        found, value = _lookup(data, key)
        if not found:
            continue
        # bool only: TOML integers and strings are not coerced
        if not isinstance(value, bool):
            raise ConfigError(
                f"{key}: expected boolean, got {type(value).__name__} {value!r}"
            )
        setattr(config, field.name, value)
    return config


def load(home: Path | None = None) -> Config:
    """Load user config, falling back to defaults on any error. Never raises."""
    config = Config()
    if home is None:
        home = resolve_home()
        if home is None:
            return config

    path = config_path(home)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
        decode(data, config)
    except Exception as exc:
        display.report_load_error(exc)
    return config
