"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any host-specific types (DOM nodes, soup tags, widgets).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RawBlock:
    """One annotated code block as read from the deck, plus its overrides."""

    text: str
    language: Optional[str] = None
    compiler: Optional[str] = None
    options: Optional[str] = None
    remove_regex: Optional[str] = None


@dataclass(frozen=True)
class ClassifiedLines:
    """Line sequences produced by the annotation state machine."""

    full: list[str] = field(default_factory=list)
    display: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedCodeBlock:
    """Resolved block: full source for the compiler, display source for slides."""

    language: str
    compiler: str
    options: str
    source: str
    display_source: str
    remove_regex: Optional[str] = None


@dataclass(frozen=True)
class ProcessedBlock:
    """Parsed block together with its encoded link fragment and full URL."""

    parsed: ParsedCodeBlock
    fragment: str
    url: str


@dataclass(frozen=True)
class ClickEvent:
    """Minimal click description; only modifier keys matter for navigation."""

    ctrl: bool = False
    meta: bool = False
