# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""CliReport package.

CliReport renders compiler-style diagnostic reports for command-line tools:
a severity-colored ``severity[code]: message`` header followed by optional
entries such as aligned property tables and source token call-outs.

Example:
    ```python
    from clireport import Code, Properties, Report, Severity, TokenInfo

    report = Report(Code.error("E0001", "unexpected token")).with_entry(
        TokenInfo(
            file_name="src/main.ext",
            line=12,
            position=8,
            line_text="let x = ;",
            token_len=1,
            severity=Severity.ERROR,
            message="expected an expression",
        )
    )
    print(report.render())
    ```
"""

from __future__ import annotations

from clireport.core.severity import Severity
from clireport.output.display import display_report
from clireport.rendering.fragment import Fragment, StyleRole
from clireport.rendering.styles import ChalkStyler, PlainStyler, Styler
from clireport.report import Code, Entry, Properties, Report, TokenInfo

__all__ = [
    "ChalkStyler",
    "Code",
    "Entry",
    "Fragment",
    "PlainStyler",
    "Properties",
    "Report",
    "Severity",
    "StyleRole",
    "Styler",
    "TokenInfo",
    "display_report",
]
