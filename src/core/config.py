"""Core configuration dataclasses.

We keep settings-file parsing outside the core, but these dataclasses define
the shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://slides.compiler-explorer.com"


@dataclass(frozen=True)
class Scalar:
    """A setting that applies to every language."""

    value: Any


@dataclass(frozen=True)
class PerLanguage:
    """A setting keyed by language name."""

    values: Mapping[str, str] = field(default_factory=dict)


ConfigValue = Union[Scalar, PerLanguage]


def as_config_value(raw: Any) -> Optional[ConfigValue]:
    """Wrap a raw settings value (string, mapping or null) as a ConfigValue."""

    if raw is None:
        return None
    if isinstance(raw, (Scalar, PerLanguage)):
        return raw
    if isinstance(raw, Mapping):
        return PerLanguage(dict(raw))
    return Scalar(raw)


@dataclass(frozen=True)
class CompilerExplorerConfig:
    """Immutable settings for one processing pass over a deck."""

    base_url: str = DEFAULT_BASE_URL
    max_line_length: int = 50
    editor_font_scale: float = 2.5
    compiler_font_scale: float = 3.0
    default_language: str = "c++"
    default_compiler: Optional[ConfigValue] = Scalar("g142")
    default_compiler_options: Optional[ConfigValue] = Scalar("-O1")
    additional_compiler_options: Optional[ConfigValue] = Scalar("-Wall -Wextra")
    default_remove_regex: Optional[ConfigValue] = None
    intel_syntax: bool = True
    trim_asm_whitespace: bool = True
    undent: bool = True


# Host-facing (camelCase) keys mapped onto dataclass fields.
_FIELD_NAMES = {
    "baseUrl": "base_url",
    "maxLineLength": "max_line_length",
    "editorFontScale": "editor_font_scale",
    "compilerFontScale": "compiler_font_scale",
    "defaultLanguage": "default_language",
    "defaultCompiler": "default_compiler",
    "defaultCompilerOptions": "default_compiler_options",
    "additionalCompilerOptions": "additional_compiler_options",
    "defaultRemoveRegex": "default_remove_regex",
    "intelSyntax": "intel_syntax",
    "trimAsmWhitespace": "trim_asm_whitespace",
    "undent": "undent",
}

_PER_LANGUAGE_FIELDS = {
    "default_compiler",
    "default_compiler_options",
    "additional_compiler_options",
    "default_remove_regex",
}

_SCALAR_TYPES = {
    "base_url": (str,),
    "max_line_length": (int,),
    "editor_font_scale": (int, float),
    "compiler_font_scale": (int, float),
    "default_language": (str,),
    "intel_syntax": (bool,),
    "trim_asm_whitespace": (bool,),
    "undent": (bool,),
}


def _is_valid(name: str, raw: Any) -> bool:
    if name in _PER_LANGUAGE_FIELDS:
        return raw is None or isinstance(raw, (str, Mapping))
    # bool is an int subclass, so numeric fields must reject it explicitly.
    if isinstance(raw, bool) and bool not in _SCALAR_TYPES[name]:
        return False
    return isinstance(raw, _SCALAR_TYPES[name])


def initialize_config(overrides: Optional[Mapping[str, Any]] = None) -> CompilerExplorerConfig:
    """Shallow-merge user overrides onto the built-in defaults.

    Overrides use the host's camelCase keys. A user who overrides one field
    does not need to supply the rest. Unknown keys, and values of the wrong
    type (e.g. a null or quoted maxLineLength), are ignored with a warning so
    the built-in default applies.
    """

    values: dict[str, Any] = {}
    for key, raw in (overrides or {}).items():
        name = _FIELD_NAMES.get(key)
        if name is None:
            LOGGER.warning("Ignoring unknown config key: %s", key)
            continue
        if not _is_valid(name, raw):
            LOGGER.warning("Ignoring invalid value for config key %s: %r", key, raw)
            continue
        values[name] = as_config_value(raw) if name in _PER_LANGUAGE_FIELDS else raw
    return CompilerExplorerConfig(**values)
