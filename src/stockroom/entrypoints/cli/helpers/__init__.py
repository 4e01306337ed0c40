"""CLI helpers for STOCKROOM.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, the encodability probe behind those
fallbacks, OSC 8 file links for help text, and the NAME=LEVEL parser for
logger overrides.
"""

from .hyperlinks import file_link, hyperlink, supports_osc8
from .log_level_parser import parse_log_level
from .messages import error, success, supports_text, warn

__all__ = [
    "error",
    "file_link",
    "hyperlink",
    "parse_log_level",
    "success",
    "supports_osc8",
    "supports_text",
    "warn",
]
