"""Best-effort regex removal applied to source sent to the compiler service."""

from __future__ import annotations

import re
from typing import Optional

from core.ports import LoggerPort, default_logger


def redact(text: str, pattern: Optional[str], logger: LoggerPort = default_logger) -> str:
    """Remove every match of ``pattern`` from ``text``.

    An empty or missing pattern is a no-op. A pattern that fails to compile
    is reported through ``logger`` and the text is returned unchanged.
    """

    if not pattern:
        return text
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        logger(f"Invalid regex pattern: {pattern}", exc)
        return text
    return compiled.sub("", text)
