"""The ``stockroom`` command group.

The group callback runs before any subcommand. It turns the logging options
into a `LoggingSettings`, installs the handlers, and puts a freshly
bootstrapped `AppContainer` on ``ctx.obj`` unless the caller supplied one.
Subcommands then read the catalog from the context.

Examples
    $ stockroom --version
    $ stockroom -v shell
    $ STOCKROOM_CURRENCY=EUR stockroom shell
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from stockroom import __version__, config
from stockroom.bootstrap import bootstrap
from stockroom.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LoggingSettings,
    configure_logging,
    console_level,
    log_startup,
)

from .helpers.hyperlinks import file_link
from .helpers.log_level_parser import parse_log_level
from .shell import shell

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("stockroom", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """STOCKROOM command-line interface.

    STOCKROOM keeps an in-memory catalog of inventory items. Items are numbered
    in the order they are added, their stock can be updated, and the whole
    catalog can be listed or valued at any time. Nothing is written to disk.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Logs:", fg="blue", bold=True, underline=True),
        "  Flight recorder: " + file_link(DEFAULT_LOG_PATH),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console: -v adds INFO, -vv adds DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: -q hides warnings, -qq hides errors too.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="STOCKROOM_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="STOCKROOM_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    envvar="STOCKROOM_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent DEBUG records in memory, whatever -v/-q say, and write "
        "them to --log-path as soon as a warning or error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    envvar="STOCKROOM_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder to --log-path when the command exits.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="STOCKROOM_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Threshold for one logger, as NAME=LEVEL "
        "(e.g. -L stockroom.adapters=INFO). Applies to the console and the "
        "flight recorder alike. Repeatable; the environment variable takes a "
        "comma or space separated list."
    ),
)
@clickx.pass_context
def stockroom(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """STOCKROOM command-line interface."""
    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        # click-extra leaves ctx.color as None unless --no-color is given
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)

    if ctx.obj is None:
        ctx.obj = bootstrap()

    log_startup(
        logger,
        settings,
        handlers,
        version=__version__,
        catalog=ctx.obj.catalog,
        currency=config.get_currency(),
    )
    ctx.call_on_close(logging.shutdown)


stockroom.add_command(shell)
