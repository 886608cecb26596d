"""Logging helpers for applications built with APPBUNDLER.

`enable_console_logging` attaches a Rich handler to the ``appbundler`` logger
so a host application can watch composition and wrapper dispatch without
configuring the root logger. `log_composition` logs a summary of a composer,
rendering its namespace as a Rich table at DEBUG level.
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from appbundler import __version__

if TYPE_CHECKING:
    from logging import Logger

    from appbundler.composer import Composer
    from appbundler.domain.namespace import Namespace

PACKAGE_LOGGER = "appbundler"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def enable_console_logging(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Send ``appbundler`` log records to stderr through Rich.

    Calling this again replaces the handler installed by the previous call, so
    repeated calls never duplicate output.

    Args:
        level: Minimum level shown (overridden to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: The handler now attached to the package logger.
    """
    if debug_mode:
        level = logging.DEBUG

    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter("%(name)s: %(message)s" if debug_mode else "%(message)s")
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in package_logger.handlers if isinstance(h, RichHandler)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def namespace_table(app: Namespace) -> Table:
    """Build a Rich table listing each bundle and its wrapped functions."""
    table = Table(title="Composed bundles")
    table.add_column("Bundle")
    table.add_column("Functions")
    for name, bundle in app.items():
        functions = [key for key in bundle if key != "name" and callable(bundle[key])]
        table.add_row(str(name), ", ".join(functions) or "-")
    return table


def render_table(table: Table) -> str:
    """Render a Rich table to plain text for a log message."""
    console = Console(width=100, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip()


def log_composition(logger: Logger, composer: Composer) -> None:
    """Log a one-line summary of a composed application plus diagnostics.

    Emits an INFO line with the number of bundles in the namespace, then
    DEBUG lines with the Python and platform versions, the namespace table,
    the type of the current details and the composer settings.

    Args:
        logger: Logger used to emit the messages.
        composer: The composer whose state is summarized.
    """
    logger.info(
        "APPBUNDLER %s: %d bundle(s) composed",
        __version__,
        len(composer.app),
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Bundles:\n%s", render_table(namespace_table(composer.app)))
    logger.debug("Details: %s", type(composer.details).__name__)
    logger.debug("Settings: %s", composer.settings)
