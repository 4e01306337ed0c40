"""Logging setup for the STOCKROOM CLI.

Every run installs two handlers on the root logger:

* a Rich console handler on stderr, whose threshold follows ``-v``/``-q``;
* optionally, a flight recorder: a ``MemoryHandler`` that holds the most
  recent DEBUG-and-up records and writes them to a file only once something
  goes wrong (or on exit, when asked to).

The CLI gathers its choices into a `LoggingSettings`, hands it to
`configure_logging`, and then calls `log_startup` to record the settings
together with the catalog the session is working on.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from stockroom.interfaces.catalog import ItemCatalog

PROJECT_PREFIX = "stockroom"

DEFAULT_CONSOLE_LEVEL = logging.WARNING
DEFAULT_FLIGHT_CAPACITY = 2000
LEVEL_STEP = 10

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# values accepted by rich.console.Console(color_system=...)
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Turn ``-v``/``-q`` counts into a console level.

    Each flag moves one step away from WARNING; the result stays between
    DEBUG and CRITICAL however many flags are given.
    """
    level = DEFAULT_CONSOLE_LEVEL - LEVEL_STEP * verbose + LEVEL_STEP * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingSettings:
    """How logging is set up for one CLI run.

    Attributes:
        level: Console threshold (see `console_level`).
        debug: Developer mode; the console shows everything, with timestamps
            and source locations.
        color: Allow ANSI colour on the console.
        log_path: Where the flight recorder writes; None turns it off.
        flight_capacity: Number of records the flight recorder holds.
        force_flush: Write the flight recorder out on exit even without a
            warning.
        logger_levels: Per-logger thresholds from ``-L NAME=LEVEL``.
    """

    level: int = DEFAULT_CONSOLE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for loggers outside stockroom.

    The console format prints the prefix before every message, so our own
    records get an empty one.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.split(".", 1)[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def build_console_handler(
    level: int = DEFAULT_CONSOLE_LEVEL, debug: bool = False, color: bool = True
) -> RichHandler:
    """Rich handler for stderr; stdout is reserved for catalog output.

    In debug mode the level is forced to DEBUG and records carry their time,
    logger name and source path instead of the third-party prefix.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def build_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer records in memory and dump them to `path` at `flush_level`.

    The file is truncated the first time a run writes to it and is not
    created at all by a run that never flushes.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler and flight recorder on the root logger.

    Replaces whatever handlers the root logger had. Returns the handlers that
    were installed.
    """
    handlers: list[logging.Handler] = [
        build_console_handler(settings.level, settings.debug, settings.color)
    ]
    if settings.log_path is not None:
        handlers.append(
            build_flight_recorder(
                settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    # the root passes everything on; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def describe_catalog(catalog: ItemCatalog) -> str:
    """One-line summary: backend, item count and total value."""
    return (
        f"{type(catalog).__name__}, {len(catalog)} item(s), "
        f"value {catalog.total_value()}"
    )


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    *,
    version: str,
    catalog: ItemCatalog,
    currency: str,
) -> None:
    """Record the run's configuration.

    One INFO line (visible with ``-v``) names the version, console level,
    flight-recorder state and catalog backend. The DEBUG lines that follow
    mostly end up in the flight recorder, which is where they help most
    when reading a log after a failure.
    """
    logger.info(
        "STOCKROOM %s - console=%s, flight-recorder=%s, catalog=%s",
        version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
        type(catalog).__name__,
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
    logger.debug("Catalog: %s", describe_catalog(catalog))
    logger.debug("Currency label: %s", currency)
