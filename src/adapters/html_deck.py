"""reveal.js HTML deck adapter.

Reads annotated ``[data-ce]`` blocks out of a deck and writes the display
source and link back into the markup. The marker usually sits on the
``<code>`` element, but Markdown-generated slides put it on the outer
``<pre>``, so both are supported.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from core.models import ProcessedBlock, RawBlock

LOGGER = logging.getLogger(__name__)

MARKER_ATTR = "data-ce"
URL_ATTR = "data-ce-url"


class DeckError(Exception):
    """Raised when a deck file cannot be read."""


def _attr(element: Tag, name: str) -> Optional[str]:
    return element.get(name) or None


class HtmlDeck:
    """Thin BeautifulSoup wrapper around one deck document."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "html.parser")
        self._elements: List[Tag] = self._soup.find_all(attrs={MARKER_ATTR: True})

    @classmethod
    def from_path(cls, path: Path | str) -> "HtmlDeck":
        try:
            html = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise DeckError(f"Cannot read deck {path}: {exc.strerror or exc}") from exc
        return cls(html)

    def __len__(self) -> int:
        return len(self._elements)

    def blocks(self) -> List[RawBlock]:
        """Return one RawBlock per annotated element, in document order."""

        return [
            RawBlock(
                text=element.get_text(),
                language=_attr(element, "data-ce-language"),
                compiler=_attr(element, "data-ce-compiler"),
                options=_attr(element, "data-ce-options"),
                remove_regex=_attr(element, "data-ce-remove-regex"),
            )
            for element in self._elements
        ]

    def apply(self, processed: Sequence[ProcessedBlock]) -> None:
        """Swap in display sources and tag each block's parent with its link."""

        if len(processed) != len(self._elements):
            raise ValueError(
                f"Expected {len(self._elements)} processed blocks, got {len(processed)}"
            )
        for element, block in zip(self._elements, processed):
            inner_codes = element.find_all("code")
            target = inner_codes[0] if len(inner_codes) == 1 else element
            target.string = block.parsed.display_source
            # The click target is the parent so that split line-number
            # code elements still share one link.
            parent = element.parent if isinstance(element.parent, Tag) else element
            parent[URL_ATTR] = block.url
        LOGGER.debug("Applied %s blocks to deck", len(processed))

    def render(self) -> str:
        return str(self._soup)
