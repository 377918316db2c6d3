# clireport:header:start
#
#   project      : CliReport
#   file         : token_info.py
#   file_relpath : src/clireport/report/token_info.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Token info entry: a compiler-style call-out pointing at a token in a line.

Display:

```text
  --> the/file/name.ext [line=12, position=5]
   |
12 | the line text
   |     ^^^^ --- the message
   |
```

The gutter is as wide as the decimal line number. Markers use the accent color;
the carets, separator and message use the color of the token's own severity,
which is independent of the report's code severity.

`position` and `token_len` are used as raw repeat counts. They are not checked
against ``line_text``: an overrunning token simply extends past the end of the
printed line. Use `TokenInfo.in_bounds` to detect that case.
"""

from __future__ import annotations

from dataclasses import dataclass

from clireport.core.severity import Severity
from clireport.rendering.fragment import ACCENT, NEWLINE, Fragment, StyleRole
from clireport.report.util import arrow, file_and_token, padding, repeat, vertical

CARET: str = "^"
SEPARATOR: str = " --- "


@dataclass(frozen=True, order=True)
class TokenInfo:
    """Location and message of a single token within a text file.

    Attributes:
        file_name (str): The file name, displayed verbatim.
        line (int): The 1-indexed line number of the token within the file.
        position (int): The 0-indexed char position of the token's first char within the line.
        line_text (str): The literal text of the line.
        token_len (int): The token length, in characters.
        severity (Severity): Severity of the annotation (caret and message color).
        message (str): Explanation attached to the carets.

    Raises:
        ValueError: If ``line``, ``position`` or ``token_len`` is negative.
    """

    file_name: str
    line: int
    position: int
    line_text: str
    token_len: int
    severity: Severity
    message: str

    def __post_init__(self) -> None:
        for name in ("line", "position", "token_len"):
            value: int = getattr(self, name)
            if value < 0:
                raise ValueError(f"TokenInfo.{name} must be non-negative, got {value}")

    @property
    def gutter_width(self) -> int:
        """Return the width of the line-number gutter."""
        return len(str(self.line))

    @property
    def in_bounds(self) -> bool:
        """Return True if the token fits within ``line_text``."""
        return self.position + self.token_len <= len(self.line_text)

    def build(self) -> list[Fragment]:
        """Return the five-line call-out fragments.

        The last row has no trailing newline; `Report` terminates every entry.
        """
        line_number: str = str(self.line)
        width: int = len(line_number)
        role: StyleRole = self.severity.color_role
        return [
            # 1 - file name
            padding(width),
            arrow(),
            file_and_token(self.file_name, self.line, self.position),
            NEWLINE,
            # 2 - empty
            padding(width),
            vertical(),
            NEWLINE,
            # 3 - line text
            Fragment(line_number, ACCENT),
            vertical(),
            Fragment.plain(self.line_text),
            NEWLINE,
            # 4 - carets and message
            padding(width),
            vertical(),
            padding(self.position),
            Fragment(repeat(CARET, self.token_len), role),
            Fragment(SEPARATOR, role),
            Fragment(self.message, role),
            NEWLINE,
            # 5 - empty
            padding(width),
            vertical(),
        ]
