"""Application wiring for STOCKROOM."""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
