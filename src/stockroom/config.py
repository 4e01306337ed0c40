"""Configuration utilities for STOCKROOM.

This module centralizes small helpers and constants related to application configuration.
"""

import os

CURRENCY_ENVVAR = "STOCKROOM_CURRENCY"  # pragma: no mutate
DEFAULT_CURRENCY = "₹"  # pragma: no mutate
ASCII_CURRENCY_FALLBACK = "Rs."  # pragma: no mutate


def get_currency() -> str:
    """Get the currency label from the environment.

    Returns:
        The value of `STOCKROOM_CURRENCY`, or `DEFAULT_CURRENCY` when it is
        unset or blank.
    """
    if not (label := os.environ.get(CURRENCY_ENVVAR, "").strip()):
        return DEFAULT_CURRENCY
    return label
