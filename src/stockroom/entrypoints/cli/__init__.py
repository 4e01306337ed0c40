"""STOCKROOM command-line interface."""

from .main import stockroom

__all__ = ["stockroom"]
