"""URL launchers and terminal link rendering."""

from __future__ import annotations

import io
import logging
import webbrowser
from typing import Optional

import qrcode
from qrcode.exceptions import DataOverflowError

LOGGER = logging.getLogger(__name__)


def open_in_browser(url: str) -> None:
    """Default navigation: hand the URL to the system browser."""

    if not webbrowser.open(url):
        LOGGER.warning("No browser available to open link")


def render_qr(url: str) -> Optional[str]:
    """Return an ASCII QR code for ``url`` so the audience can scan it.

    Returns None when the URL does not fit in the largest QR version.
    """

    qr = qrcode.QRCode(border=1)
    qr.add_data(url)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError):
        # Older qrcode raises DataOverflowError, newer ones an invalid-version ValueError.
        return None
    out = io.StringIO()
    qr.print_ascii(out=out, invert=True)
    return out.getvalue()
