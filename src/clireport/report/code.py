# clireport:header:start
#
#   project      : CliReport
#   file         : code.py
#   file_relpath : src/clireport/report/code.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Report code: the one-line header of a report.

Display:

```text
severity[code]: message
```

The label, brackets and code share the severity color; the message is bold
bright white and never severity-colored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clireport.core.severity import Severity
from clireport.rendering.fragment import Fragment, StyleRole
from clireport.rendering.styles import PlainStyler

if TYPE_CHECKING:
    from clireport.rendering.styles import Styler


@dataclass(frozen=True, slots=True)
class Code:
    """A report code with an associated severity and message.

    Strings are stored verbatim; empty values are accepted.

    Attributes:
        severity (Severity): Severity of the report.
        code (str): Short caller-defined identifier (e.g. ``"E0001"``).
        message (str): Free-text message.
    """

    severity: Severity
    code: str
    message: str

    @classmethod
    def of(cls, severity: Severity | str, code: str, message: str) -> Code:
        """Create a code from a severity or a severity label.

        Raises:
            ValueError: If ``severity`` is an unknown label.
        """
        return cls(Severity.parse(severity), code, message)

    @classmethod
    def error(cls, code: str, message: str) -> Code:
        """Create an error code."""
        return cls(Severity.ERROR, code, message)

    @classmethod
    def warning(cls, code: str, message: str) -> Code:
        """Create a warning code."""
        return cls(Severity.WARNING, code, message)

    @classmethod
    def info(cls, code: str, message: str) -> Code:
        """Create an info code."""
        return cls(Severity.INFO, code, message)

    def fragments(self) -> list[Fragment]:
        """Return the header fragments (without a trailing newline)."""
        role: StyleRole = self.severity.color_role
        return [
            Fragment(self.severity.label, role),
            Fragment("[", role),
            Fragment(self.code, role),
            Fragment("]: ", role),
            Fragment(self.message, StyleRole.EMPHASIS),
        ]

    def render(self, styler: Styler | None = None) -> str:
        """Render the header line.

        Args:
            styler (Styler | None): Styler applied to each fragment; plain text when None.

        Returns:
            str: The header line without a trailing newline.
        """
        style: Styler = styler if styler is not None else PlainStyler()
        return "".join(style(f) for f in self.fragments())

    def __str__(self) -> str:
        return self.render()
