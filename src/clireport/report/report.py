# clireport:header:start
#
#   project      : CliReport
#   file         : report.py
#   file_relpath : src/clireport/report/report.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Command-line report: a code header followed by zero or more entries.

Display:

```text
severity[code]: message
entry
entry
```

Rendering is pure and repeatable. Exactly one newline is written after each
entry, whether or not the entry's own fragments already end with one: a
[`Properties`][clireport.report.properties.Properties] entry is therefore
followed by a blank line, while a
[`TokenInfo`][clireport.report.token_info.TokenInfo] entry is not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clireport.config.logging import get_logger
from clireport.rendering.fragment import NEWLINE, Fragment
from clireport.rendering.styles import PlainStyler
from clireport.report.entry import as_fragments

if TYPE_CHECKING:
    from clireport.config.logging import ClireportLogger
    from clireport.rendering.styles import Styler
    from clireport.report.code import Code
    from clireport.report.entry import EntryLike


logger: ClireportLogger = get_logger(__name__)


class Report:
    """A command-line report.

    The report exclusively owns its code and entries. Entries are stored as
    fragment lists copied at append time, so later changes to a `Properties`
    builder do not leak into an already appended entry.

    Args:
        code (Code): The header code.
    """

    def __init__(self, code: Code) -> None:
        self._code: Code = code
        self._entries: list[list[Fragment]] = []

    @classmethod
    def from_code(cls, code: Code) -> Report:
        """Create a report without entries from ``code``."""
        return cls(code)

    @property
    def code(self) -> Code:
        """Return the header code."""
        return self._code

    @property
    def entries(self) -> tuple[tuple[Fragment, ...], ...]:
        """Return the entries in insertion order."""
        return tuple(tuple(entry) for entry in self._entries)

    def add_entry(self, entry: EntryLike) -> None:
        """Append an entry.

        Args:
            entry (EntryLike): An `Entry` (e.g. `Properties`, `TokenInfo`) or an
                iterable of fragments.

        Raises:
            TypeError: If ``entry`` cannot be converted to fragments.
        """
        fragments: list[Fragment] = as_fragments(entry)
        self._entries.append(fragments)
        logger.trace(
            "Added entry #%d (%d fragments) to %s[%s]",
            len(self._entries),
            len(fragments),
            self._code.severity.label,
            self._code.code,
        )

    def with_entry(self, entry: EntryLike) -> Report:
        """Append an entry and return ``self`` for chaining."""
        self.add_entry(entry)
        return self

    def fragments(self) -> list[Fragment]:
        """Return all fragments of the report in display order.

        Returns:
            list[Fragment]: The code fragments and a newline, then each entry's
            fragments followed by one newline.
        """
        out: list[Fragment] = [*self._code.fragments(), NEWLINE]
        for entry in self._entries:
            out.extend(entry)
            out.append(NEWLINE)
        return out

    def render(self, styler: Styler | None = None) -> str:
        """Render the report to text.

        Args:
            styler (Styler | None): Styler applied to each fragment; plain text when None.

        Returns:
            str: The newline-terminated report.
        """
        style: Styler = styler if styler is not None else PlainStyler()
        return "".join(style(f) for f in self.fragments())

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Report(code={self._code!r}, entries={len(self._entries)})"
