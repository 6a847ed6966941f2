"""Settings file loading for deckscope.

All user-editable settings (compiler defaults, logging) live in a single
JSON file next to the deck for quick edits without touching Python. The
``"ce"`` section has the same shape as the reveal.js ``ce`` config object.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.config import CompilerExplorerConfig, initialize_config

DEFAULT_CONFIG_NAME = "deckscope.json"

# Env var that points at an alternative settings file.
CONFIG_ENV_VAR = "DECKSCOPE_CONFIG"


class SettingsError(Exception):
    """Raised when the settings file exists but cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Loaded settings: the immutable core config plus the raw logging section."""

    config: CompilerExplorerConfig
    logging: dict[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """Pick the settings file: CLI flag, then environment, then the default name."""

    if explicit:
        return Path(explicit)
    load_dotenv()
    from_env = os.getenv(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _load_json_config(path: Path) -> dict:
    """Load the settings file with a flat, user-friendly schema."""

    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SettingsError(f"{path}: {exc.msg} (line {exc.lineno})") from exc
    except OSError as exc:
        raise SettingsError(f"{path}: {exc.strerror or exc}") from exc
    if not isinstance(loaded, dict):
        raise SettingsError(f"{path}: config root must be an object")
    return loaded


def load_settings(explicit: Optional[str] = None) -> Settings:
    """Load settings, falling back to built-in defaults when no file exists."""

    path = resolve_config_path(explicit)
    if not path.exists():
        if explicit:
            raise SettingsError(f"Config file not found: {path}")
        return Settings(config=initialize_config(None))

    raw = _load_json_config(path)
    overrides = raw.get("ce")
    if overrides is not None and not isinstance(overrides, dict):
        raise SettingsError(f"{path}: 'ce' must be an object")
    logging_section = raw.get("logging") or {}
    return Settings(config=initialize_config(overrides), logging=dict(logging_section), path=path)
