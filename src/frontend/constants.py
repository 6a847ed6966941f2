"""Shared constants for the Textual UI."""

from __future__ import annotations

ACCENT = "#67C52A"
TITLE_PREFIX = "DECK"
TITLE_SUFFIX = "SCOPE > Preview"
