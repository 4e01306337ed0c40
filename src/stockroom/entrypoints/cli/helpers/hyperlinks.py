"""Clickable terminal links (OSC 8) for CLI output.

A link is only emitted when the stream is an interactive terminal that is
known to render OSC 8; otherwise the label is printed as plain text.
"""

import os
import sys
from pathlib import Path
from typing import TextIO

# lower-cased $TERM_PROGRAM values of terminals that render OSC 8
OSC8_TERMINALS = frozenset(
    {"apple_terminal", "iterm.app", "kitty", "vscode", "wezterm"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether `stream` (stdout by default) renders OSC 8 hyperlinks."""
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINALS:
        return True
    # Windows Terminal and VTE-based terminals (GNOME Terminal, Tilix)
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None, stream: TextIO | None = None) -> str:
    """Return `label` (the URL itself by default) linked to `url`.

    Without OSC 8 support only the label is returned, so callers should pick a
    label that still makes sense as plain text.
    """
    label = label or url
    if not supports_osc8(stream):
        return label
    return f"\x1b]8;;{url}\x1b\\{label}\x1b]8;;\x1b\\"


def file_link(path: Path, stream: TextIO | None = None) -> str:
    """Link to a local file, labelled with its path."""
    return hyperlink(path.resolve().as_uri(), str(path), stream)
