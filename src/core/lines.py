"""Annotation state machine that splits a block into full and display lines."""

from __future__ import annotations

import re
from typing import Iterable

from core.models import ClassifiedLines
from core.ports import LoggerPort

HIDE_MARKER = re.compile(r"^\s*///\s*((?:un)?hide)\s*$")
SETUP_MARKER = "// setup"


def classify_lines(lines: Iterable[str], max_line_length: int, report: LoggerPort) -> ClassifiedLines:
    """Run the hide/setup state machine over ``lines`` in one pass.

    State:
    - ``hidden`` flips on ``///hide`` / ``///unhide`` marker lines. Markers are
      consumed: they reach neither output and are not length-checked.
    - ``setup`` starts at a line that is exactly ``// setup`` and ends at the
      first non-empty line whose first character is not a space. Blank lines
      never end it.

    Every other line goes to ``full``; it goes to ``display`` only when
    neither state is active. Lines longer than ``max_line_length`` are
    reported once each, whatever the state.
    """

    full: list[str] = []
    display: list[str] = []
    hidden = False
    setup = False

    for line in lines:
        marker = HIDE_MARKER.match(line)
        if marker:
            hidden = marker.group(1) == "hide"
            continue

        if line == SETUP_MARKER:
            setup = True
        elif line and not line.startswith(" "):
            setup = False

        full.append(line)
        if not hidden and not setup:
            display.append(line)
        if len(line) > max_line_length:
            report(f'Line too long: "{line}"')

    return ClassifiedLines(full=full, display=display)
