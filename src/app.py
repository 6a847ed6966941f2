"""Application entry point for deckscope."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from art import tprint

import settings
from adapters.html_deck import DeckError, HtmlDeck
from adapters.launchers import open_in_browser, render_qr
from core.models import ProcessedBlock
from core.processor import DeckProcessor

NAME = "DECKSCOPE"
FONT = "tarty-1"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging(config: dict[str, Any]) -> None:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Soft warnings (long lines, bad patterns) must reach the user even when
    # logging has not been configured.
    if not config.get("enabled", False):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logging.basicConfig(level=logging.WARNING, handlers=[handler])
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/deckscope.log")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _load_and_process(args: argparse.Namespace) -> tuple[settings.Settings, HtmlDeck, list[ProcessedBlock]]:
    loaded = settings.load_settings(args.config)
    _configure_logging(loaded.logging)
    logger = logging.getLogger(__name__)
    if loaded.path:
        logger.info("Loaded settings from %s", loaded.path)

    deck = HtmlDeck.from_path(args.deck)
    processor = DeckProcessor(loaded.config)
    processed = processor.process(deck.blocks())
    return loaded, deck, processed


def _render(args: argparse.Namespace) -> None:
    _, deck, processed = _load_and_process(args)
    deck.apply(processed)
    output = deck.render()
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logging.getLogger(__name__).info("Wrote %s blocks to %s", len(processed), args.output)
    else:
        sys.stdout.write(output)


def _links(args: argparse.Namespace) -> None:
    _, _, processed = _load_and_process(args)
    for index, block in enumerate(processed, start=1):
        print(f"{index}. {block.parsed.language} | {block.parsed.compiler} | {block.url}")
        if args.qr:
            qr = render_qr(block.url)
            if qr is None:
                logging.getLogger(__name__).warning("Block %s link is too long for a QR code", index)
            else:
                print(qr)


def _preview(args: argparse.Namespace) -> None:
    _print_banner()
    loaded, _, processed = _load_and_process(args)
    from frontend.app import PreviewApp

    PreviewApp(
        loaded.config,
        processed,
        url_launcher=open_in_browser,
        deck_name=Path(args.deck).name,
    ).run()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="deckscope")
    parser.add_argument("--config", help="Path to deckscope.json (defaults to $DECKSCOPE_CONFIG or ./deckscope.json)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Rewrite a deck with display sources and links")
    render_parser.add_argument("deck")
    render_parser.add_argument("-o", "--output", help="Output file (defaults to stdout)")

    links_parser = subparsers.add_parser("links", help="Print the Compiler Explorer link of every block")
    links_parser.add_argument("deck")
    links_parser.add_argument("--qr", action="store_true", help="Also print an ASCII QR code per link")

    preview_parser = subparsers.add_parser("preview", help="Browse blocks in a terminal UI")
    preview_parser.add_argument("deck")

    args = parser.parse_args(argv)
    commands = {"render": _render, "links": _links, "preview": _preview}
    try:
        commands[args.command](args)
    except (settings.SettingsError, DeckError) as exc:
        print(f"deckscope: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
