"""Boundary blank-line trimming and undenting (core domain)."""

from __future__ import annotations

import re
from typing import Sequence

_LEADING_WHITESPACE = re.compile(r"^\s*")


def _is_blank(line: str) -> bool:
    return not line.strip()


def trim(lines: Sequence[str], undent: bool) -> str:
    """Drop leading/trailing blank lines and optionally undent, then join.

    The minimum indent is taken over non-blank lines only; blank lines are
    still sliced by it and simply end up shorter or empty. The caller's
    sequence is never modified.
    """

    start = 0
    end = len(lines)
    while start < end and _is_blank(lines[start]):
        start += 1
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    kept = list(lines[start:end])
    if not kept:
        return ""

    if undent:
        indents = [len(_LEADING_WHITESPACE.match(line).group(0)) for line in kept if not _is_blank(line)]
        if indents:
            indent = min(indents)
            kept = [line[indent:] for line in kept]

    return "\n".join(kept)
