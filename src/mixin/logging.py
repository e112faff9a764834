"""Console logging for the MIXIN CLI.

Library modules only ever call ``logging.getLogger(__name__)``; the ``mixin``
command installs a single Rich handler on the root logger through
`config_console_handler`. Records from other packages (``click_extra``, or
whatever a contract module imports) are tagged with a short prefix so they
stand apart from the contract diagnostics.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version

from rich.console import Console
from rich.logging import RichHandler

from .config import AMBIGUOUS_ACCESSORS_ENV

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "mixin"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"


class ThirdPartyPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``[package]`` for loggers outside ``mixin``.

    Project records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler used by the ``mixin`` command.

    Args:
        level: Minimum level shown (forced to DEBUG in ``debug_mode``).
        debug_mode: Show timestamps, logger names and source locations
            instead of the third-party prefix.
        color: Let Rich pick a color system; ``False`` disables color, in
            line with Click-Extra's ``--no-color``.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log the version line, then DEBUG diagnostics about the environment.

    The diagnostics include the raw ``MIXIN_AMBIGUOUS_ACCESSORS`` value, since
    it changes what ``check`` and ``Mixin.api`` report.
    """
    logger.info("MIXIN %s (console=%s)", app_version, logging.getLevelName(level))

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug(
        "%s: %s",
        AMBIGUOUS_ACCESSORS_ENV,
        os.environ.get(AMBIGUOUS_ACCESSORS_ENV) or "<unset>",
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
