"""Block parsing: annotated text plus overrides into a ParsedCodeBlock."""

from __future__ import annotations

from core.config import CompilerExplorerConfig
from core.indent import trim
from core.lines import classify_lines
from core.models import ParsedCodeBlock, RawBlock
from core.ports import LoggerPort, default_logger
from core.resolver import resolve

FALLBACK_COMPILER_OPTIONS = "-O1"


def parse_code_block(
    config: CompilerExplorerConfig,
    block: RawBlock,
    logger: LoggerPort = default_logger,
) -> ParsedCodeBlock:
    """Split one block into full/display sources and resolve its settings.

    Never raises: block attributes win over config defaults, and missing
    values fall back to documented defaults. Long lines are reported through
    ``logger``; bad remove patterns only surface when the link is built.
    """

    classified = classify_lines(block.text.split("\n"), config.max_line_length, logger)

    language = block.language or config.default_language
    compiler = block.compiler or resolve(config.default_compiler, language)
    options = block.options or resolve(config.default_compiler_options, language, FALLBACK_COMPILER_OPTIONS)
    remove_regex = block.remove_regex or resolve(config.default_remove_regex, language) or None

    return ParsedCodeBlock(
        language=language,
        compiler=compiler,
        options=options,
        source=trim(classified.full, False),
        display_source=trim(classified.display, config.undent),
        remove_regex=remove_regex,
    )
