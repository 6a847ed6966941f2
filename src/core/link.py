"""Compiler Explorer link payload construction and encoding (core domain).

The payload mirrors the service's golden-layout state: a version-4 envelope
holding one row with a code editor and a compiler pane wired to it.
"""

from __future__ import annotations

import json
from typing import Any, Optional
from urllib.parse import quote

from core.config import CompilerExplorerConfig, ConfigValue
from core.ports import LoggerPort, default_logger
from core.redact import redact
from core.resolver import resolve

LAYOUT_VERSION = 4
EDITOR_ID = 1

# Characters encodeURIComponent leaves alone besides ASCII letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _json_number(value: Any) -> Any:
    # Integral floats serialize as integers so 3.0 is written as 3.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def join_compiler_options(
    config: CompilerExplorerConfig,
    options: Optional[ConfigValue] | str,
    language: str,
) -> str:
    """Primary options first, additional options appended, empties dropped."""

    parts = [
        resolve(options, language),
        resolve(config.additional_compiler_options, language),
    ]
    return " ".join(str(part) for part in parts if part)


def build_link_payload(
    config: CompilerExplorerConfig,
    source: str,
    options: Optional[ConfigValue] | str,
    language: str,
    compiler: str,
    remove_regex: Optional[str] = None,
    logger: LoggerPort = default_logger,
) -> dict[str, Any]:
    """Assemble the layout envelope for one block.

    The editor pane carries the redacted source so that it always matches
    what the compiler pane compiles.
    """

    editor_source = redact(source, remove_regex, logger)
    editor = {
        "type": "component",
        "componentName": "codeEditor",
        "componentState": {
            "id": EDITOR_ID,
            "source": editor_source,
            "options": {"compileOnChange": True, "colouriseAsm": True},
            "fontScale": _json_number(config.editor_font_scale),
            "lang": language,
        },
    }
    compiler_pane = {
        "type": "component",
        "componentName": "compiler",
        "componentState": {
            "source": EDITOR_ID,
            "filters": {
                "commentOnly": True,
                "directives": True,
                "intel": config.intel_syntax,
                "labels": True,
                "trim": config.trim_asm_whitespace,
            },
            "options": join_compiler_options(config, options, language),
            "compiler": compiler,
            "fontScale": _json_number(config.compiler_font_scale),
        },
    }
    return {
        "version": LAYOUT_VERSION,
        "content": [{"type": "row", "content": [editor, compiler_pane]}],
    }


def encode_payload(payload: dict[str, Any]) -> str:
    """Serialize to compact JSON and percent-encode it like encodeURIComponent."""

    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return quote(text, safe=_URI_COMPONENT_SAFE)


def create_link_fragment(
    config: CompilerExplorerConfig,
    source: str,
    options: Optional[ConfigValue] | str,
    language: str,
    compiler: str,
    remove_regex: Optional[str] = None,
    logger: LoggerPort = default_logger,
) -> str:
    """Return the URL fragment (the part after ``#``) for one block."""

    payload = build_link_payload(config, source, options, language, compiler, remove_regex, logger)
    return encode_payload(payload)


def build_url(config: CompilerExplorerConfig, fragment: str) -> str:
    return f"{config.base_url}#{fragment}"
