"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for the side-effecting callbacks the core
receives (reporting and navigation) so that the core stays pure and can be
driven from the CLI, the preview UI or tests alike.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

LOGGER = logging.getLogger(__name__)


class LoggerPort(Protocol):
    """Reporting callback for soft warnings (long lines, bad patterns)."""

    def __call__(self, message: str, *args: Any) -> None:
        ...


class UrlLauncherPort(Protocol):
    """Navigation callback that opens a fully built URL."""

    def __call__(self, url: str) -> None:
        ...


def default_logger(message: str, *args: Any) -> None:
    """Report through the error log, mirroring a browser's console.error."""

    if args:
        message = " ".join([message, *(str(arg) for arg in args)])
    LOGGER.error(message)
