"""MIXIN CLI entry point.

Defines the top-level ``mixin`` command (via Click-Extra) and registers the
contract commands.

Currently available commands
- ``mixin check`` — validate a contract class.
- ``mixin inspect`` — list a contract's static and instance surface.

Notes
- The CLI version is sourced from `mixin.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ mixin --version
    $ mixin check mypackage.contracts:Answer
    $ mixin -v inspect mypackage.contracts:Answer --json
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from mixin import __version__, config
from mixin.logging import config_console_handler, log_startup

from .contract import check, inspect
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """MIXIN command-line interface.

    Developer tools for contracts: classes deriving from Mixin.Super whose
    surface and privileged per-instance state are applied to unrelated host
    classes.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
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
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L mixin.core=DEBUG) or via MIXIN_LOGGER_LEVELS (comma/space list)."
    ),
    envvar=config.LOGGER_LEVELS_ENV,
    show_envvar=True,
)
@clickx.pass_context
def mixin(
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """MIXIN command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


mixin.add_command(check)
mixin.add_command(inspect)
