# clireport:header:start
#
#   project      : CliReport
#   file         : properties.py
#   file_relpath : src/clireport/report/properties.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Properties entry: an aligned name/value table.

Display:

```text
    first:  value
    second: another value
    third:  third value
```

Names (and their colons) use the info color regardless of the report's own
severity. Values start at the same column on every row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from clireport.core.severity import Severity
from clireport.rendering.fragment import NEWLINE, Fragment, StyleRole
from clireport.report.util import padding

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

MARGIN: Final[int] = 4
GAP: Final[int] = 2


class Properties:
    """Ordered name/value pairs rendered as an aligned table.

    Insertion order is preserved and duplicate names are kept as separate rows.

    Args:
        pairs (Iterable[tuple[str, str]] | None): Optional initial pairs.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] | None = None) -> None:
        self._properties: list[tuple[str, str]] = []
        for name, value in pairs or ():
            self.add(name, value)

    @property
    def properties(self) -> tuple[tuple[str, str], ...]:
        """Return the pairs in insertion order."""
        return tuple(self._properties)

    def add(self, name: str, value: str) -> None:
        """Append a property."""
        self._properties.append((name, value))

    def with_property(self, name: str, value: str) -> Properties:
        """Append a property and return ``self`` for chaining."""
        self.add(name, value)
        return self

    def build(self) -> list[Fragment]:
        """Return the table fragments, six per row.

        Each row is: margin, name, colon, padding, value, newline. The padding is
        ``max_len - len(name) + 2`` so every value starts ``max_len + 2`` columns
        after the name column. An empty table yields no fragments.
        """
        max_len: int = max((len(name) for name, _ in self._properties), default=0)
        label_role: StyleRole = Severity.INFO.color_role

        fragments: list[Fragment] = []
        for name, value in self._properties:
            fragments.extend(
                (
                    padding(MARGIN),
                    Fragment(name, label_role),
                    Fragment(":", label_role),
                    padding(max_len - len(name) + GAP),
                    Fragment.plain(value),
                    NEWLINE,
                )
            )
        return fragments

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"Properties({self._properties!r})"
