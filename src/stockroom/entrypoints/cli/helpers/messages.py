"""Terminal message helpers for the STOCKROOM CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Status messages write to stderr so stdout carries only catalog output.
"""

from typing import Literal, TypeAlias

import click

StreamName: TypeAlias = Literal["stdout", "stderr"]

# kind: (emoji, ascii fallback, colour)
_STYLES = {
    "warn": ("⚠️", "[!]", "yellow"),  # pragma: no mutate
    "success": ("✅", "[OK]", "green"),  # pragma: no mutate
    "error": ("❌", "[X]", "red"),  # pragma: no mutate
}


def supports_text(text: str, stream: StreamName = "stderr") -> bool:
    """Return True if *text* can be encoded on the given standard stream.

    The stream is looked up through Click on every call, so redirected or
    replaced streams are honoured.

    Args:
        text: The characters to probe (e.g., "⚠️", "₹").
        stream: Which standard stream will receive the text.

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    encoding = getattr(click.get_text_stream(stream), "encoding", None) or "utf-8"
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Marker for a message kind, falling back to ASCII where needed.

    Args:
        kind: One of "warn", "success" or "error".

    Returns:
        str: The emoji when stderr can encode it, otherwise "[!]", "[OK]" or "[X]".
    """
    emoji, fallback, _ = _STYLES[kind]
    return emoji if supports_text(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    colour = _STYLES[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=colour, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Invalid choice. Please try again.``
    """
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Item added successfully with ID: 3``
    """
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Item with ID 9 not found.``
    """
    _emit("error", msg)
