"""Textual preview app for processed deck code blocks."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from rich.syntax import Syntax
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widgets import Footer, Static

from core.config import CompilerExplorerConfig
from core.models import ClickEvent, ProcessedBlock
from core.ports import UrlLauncherPort
from core.processor import make_click_handler

from .constants import ACCENT, TITLE_PREFIX, TITLE_SUFFIX


class BlockView(Static):
    """One code block as the audience sees it; ctrl/meta+click opens its link."""

    def __init__(self, block: ProcessedBlock, on_click: Callable[[ClickEvent], None], **kwargs: Any) -> None:
        super().__init__(self._render_source(block), **kwargs)
        self.processed = block
        self._click_handler = on_click

    @staticmethod
    def _render_source(block: ProcessedBlock) -> Syntax:
        return Syntax(block.parsed.display_source, block.parsed.language, line_numbers=False)

    def on_click(self, event: events.Click) -> None:
        self._click_handler(ClickEvent(ctrl=event.ctrl, meta=event.meta))


class PreviewApp(App):
    """Lists every processed block with its resolved compiler settings."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+c", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #header {
        height: 5;
        padding: 1 4;
        border-bottom: solid #2a3a46;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #c6d2dd;
    }

    #blocks {
        padding: 1 4;
    }

    .block-meta {
        color: #c6d2dd;
        margin-top: 1;
    }

    BlockView {
        border: round #2a3a46;
        padding: 0 1;
    }

    BlockView:hover {
        border: round #67C52A;
    }
    """

    def __init__(
        self,
        config: CompilerExplorerConfig,
        blocks: Sequence[ProcessedBlock],
        url_launcher: UrlLauncherPort,
        deck_name: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._blocks = list(blocks)
        self._url_launcher = url_launcher
        self._deck_name = deck_name

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal():
                with Vertical():
                    yield Static(self._title_text(), id="title")
                    yield Static(f"deck: {self._deck_name or '-'}", classes="subtle")
                with Vertical():
                    yield Static(f"blocks: {len(self._blocks)}", classes="subtle")
                    yield Static("ctrl+click a block to open it", classes="subtle", id="status")

        with VerticalScroll(id="blocks"):
            for index, block in enumerate(self._blocks, start=1):
                parsed = block.parsed
                yield Static(
                    f"#{index}  {parsed.language} | {parsed.compiler} | {parsed.options}",
                    classes="block-meta",
                )
                yield BlockView(block, self._launcher_for(index, block), id=f"block-{index}")
        yield Footer()

    def _launcher_for(self, index: int, block: ProcessedBlock) -> Callable[[ClickEvent], None]:
        def launch(url: str) -> None:
            self.query_one("#status", Static).update(f"opened block #{index}")
            self._url_launcher(url)

        return make_click_handler(self._config, block.fragment, launch)

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            (TITLE_PREFIX, ACCENT),
            (TITLE_SUFFIX, "bold"),
        )
