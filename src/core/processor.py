"""Core deck processing pipeline.

This module is host-agnostic. It only relies on the reporting and navigation
ports, enabling the CLI, the preview UI or tests to drive it unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from core.config import CompilerExplorerConfig
from core.link import build_url, create_link_fragment
from core.models import ClickEvent, ProcessedBlock, RawBlock
from core.parser import parse_code_block
from core.ports import LoggerPort, UrlLauncherPort, default_logger

LOGGER = logging.getLogger(__name__)


class DeckProcessor:
    """Parses blocks and builds their compiler links."""

    def __init__(self, config: CompilerExplorerConfig, logger: LoggerPort = default_logger) -> None:
        self._config = config
        self._logger = logger

    def handle(self, block: RawBlock) -> ProcessedBlock:
        """Process one block through parse, redact and encode."""

        parsed = parse_code_block(self._config, block, self._logger)
        fragment = create_link_fragment(
            self._config,
            parsed.source,
            parsed.options,
            parsed.language,
            parsed.compiler,
            parsed.remove_regex,
            self._logger,
        )
        return ProcessedBlock(parsed=parsed, fragment=fragment, url=build_url(self._config, fragment))

    def process(self, blocks: Iterable[RawBlock]) -> List[ProcessedBlock]:
        """Process every block independently, preserving input order."""

        processed = [self.handle(block) for block in blocks]
        LOGGER.info("Processed %s code blocks", len(processed))
        return processed


def make_click_handler(
    config: CompilerExplorerConfig,
    fragment: str,
    url_launcher: UrlLauncherPort,
) -> Callable[[ClickEvent], None]:
    """Return a click callback that opens the block's link on ctrl/meta-click.

    Plain clicks do nothing, leaving normal slide interaction untouched.
    """

    url = build_url(config, fragment)

    def on_click(event: ClickEvent) -> None:
        if event.ctrl or event.meta:
            LOGGER.debug("Opening %s", config.base_url)
            url_launcher(url)

    return on_click
