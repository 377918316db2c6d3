# clireport:header:start
#
#   project      : CliReport
#   file         : console_std.py
#   file_relpath : src/clireport/output/console_std.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Stdlib report console (no Click, never colored)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from clireport.output.console_api import ReportConsole, routes_to_stderr

if TYPE_CHECKING:
    from clireport.core.severity import Severity


class StdConsole(ReportConsole):
    """Plain-text report console for files, pipes and tests.

    Args:
        out (TextIO | None): Stream for reports below the threshold. Defaults to sys.stdout.
        err (TextIO | None): Stream for reports at or above the threshold. Defaults to sys.stderr.
        stderr_threshold (Severity | None): Least severe level routed to ``err``.
    """

    enable_color = False

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        stderr_threshold: Severity | None = None,
    ) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.stderr_threshold = stderr_threshold

    def write_report(self, text: str, severity: Severity) -> None:
        """Write ``text`` and flush so reports interleave correctly with other output."""
        stream: TextIO = self.err if routes_to_stderr(severity, self.stderr_threshold) else self.out
        stream.write(text)
        stream.flush()
