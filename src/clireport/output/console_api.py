# clireport:header:start
#
#   project      : CliReport
#   file         : console_api.py
#   file_relpath : src/clireport/output/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Console interface for rendered reports.

A console receives finished report text together with the report severity, and
decides which stream it goes to. Rendering never happens here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clireport.core.severity import Severity


class ReportConsole(Protocol):
    """Destination for rendered reports.

    Attributes:
        enable_color (bool): Whether the console keeps ANSI styling. Reports are
            rendered with a styler chosen from this flag.
    """

    enable_color: bool

    def write_report(self, text: str, severity: Severity) -> None:
        """Write newline-terminated report text for a report of ``severity``."""
        ...


def routes_to_stderr(severity: Severity, stderr_threshold: Severity | None) -> bool:
    """Return True if a report of ``severity`` belongs on the error stream.

    Args:
        severity (Severity): Severity of the report's code.
        stderr_threshold (Severity | None): Least severe level sent to stderr;
            ``None`` keeps every report on stdout.

    Returns:
        bool: True when ``severity`` is at least as severe as the threshold.
    """
    return stderr_threshold is not None and severity <= stderr_threshold
