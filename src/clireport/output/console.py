# clireport:header:start
#
#   project      : CliReport
#   file         : console.py
#   file_relpath : src/clireport/output/console.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Click-based report console.

`click.echo` strips ANSI sequences when ``enable_color`` is False, so a report
rendered with styling still lands as plain text on a colorless console.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from clireport.output.console_api import ReportConsole, routes_to_stderr

if TYPE_CHECKING:
    from clireport.core.severity import Severity


class ClickConsole(ReportConsole):
    """Report console writing through `click.echo`.

    Args:
        enable_color (bool): Keep ANSI styling in the output.
        out (TextIO | None): Stream for reports below the threshold. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for reports at or above the threshold.
            Defaults to `sys.stderr`.
        stderr_threshold (Severity | None): Least severe level routed to ``err``
            (e.g. `Severity.WARNING` sends errors and warnings there). ``None``
            keeps everything on ``out``.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        stderr_threshold: Severity | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.stderr_threshold = stderr_threshold

    def write_report(self, text: str, severity: Severity) -> None:
        """Echo ``text`` as-is; the rendering already ends with a newline."""
        stream: TextIO = self.err if routes_to_stderr(severity, self.stderr_threshold) else self.out
        click.echo(text, nl=False, file=stream, color=self.enable_color)
