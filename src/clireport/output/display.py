# clireport:header:start
#
#   project      : CliReport
#   file         : display.py
#   file_relpath : src/clireport/output/display.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Write rendered reports to a console.

This is the only place where a report reaches an output stream. Rendering
itself stays pure; the console decides whether styling is kept.

Notes:
    When called inside a Click command whose ``ctx.obj["console"]`` holds a
    console, that console is used, so reports share the host tool's color
    settings and streams.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clireport.config.logging import get_logger
from clireport.output.color import resolve_color_mode
from clireport.output.console import ClickConsole
from clireport.rendering.styles import ChalkStyler, PlainStyler

if TYPE_CHECKING:
    from clireport.config.logging import ClireportLogger
    from clireport.output.color import ColorMode
    from clireport.output.console_api import ReportConsole
    from clireport.rendering.styles import Styler
    from clireport.report.report import Report


logger: ClireportLogger = get_logger(__name__)

CONSOLE_KEY: str = "console"


def styler_for(enable_color: bool) -> Styler:
    """Return a `ChalkStyler` when color is enabled, a `PlainStyler` otherwise."""
    return ChalkStyler() if enable_color else PlainStyler()


def get_console(color_mode: ColorMode | None = None) -> ReportConsole:
    """Return the console to write reports to.

    Args:
        color_mode (ColorMode | None): Color intent used when a new console is created.

    Returns:
        ReportConsole: The console stored in the active Click context, if any;
        otherwise a new `ClickConsole` with the resolved color mode.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict) and CONSOLE_KEY in ctx.obj:
        console: ReportConsole = ctx.obj[CONSOLE_KEY]
        return console
    return ClickConsole(enable_color=resolve_color_mode(color_mode_override=color_mode))


def display_report(report: Report, console: ReportConsole | None = None) -> str:
    """Render ``report`` and hand it to ``console``.

    The console picks the stream from the report's severity.

    Args:
        report (Report): The report to display.
        console (ReportConsole | None): Target console; see `get_console` when None.

    Returns:
        str: The text that was written.
    """
    target: ReportConsole = console if console is not None else get_console()
    text: str = report.render(styler_for(target.enable_color))
    logger.trace(
        "Displaying %s[%s] with %d entries (color=%s)",
        report.code.severity.label,
        report.code.code,
        len(report),
        target.enable_color,
    )
    target.write_report(text, report.code.severity)
    return text
