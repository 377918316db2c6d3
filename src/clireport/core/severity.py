# clireport:header:start
#
#   project      : CliReport
#   file         : severity.py
#   file_relpath : src/clireport/core/severity.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Report severity levels.

`Severity` is a closed set of levels ordered by importance, with ERROR ranked
first. Each level exposes a stable lowercase label (used both for display and
as a machine key) and a semantic color role. Concrete terminal colors are
resolved later by a styler, never here.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from clireport.rendering.fragment import StyleRole


@total_ordering
class Severity(Enum):
    """Severity of a report or of a token annotation.

    Members compare by declaration rank: ``ERROR < WARNING < INFO``.

    Example:
        >>> sorted([Severity.INFO, Severity.ERROR])
        [<Severity.ERROR: 'error'>, <Severity.INFO: 'info'>]
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def label(self) -> str:
        """Return the lowercase display label (``"error"``, ``"warning"`` or ``"info"``)."""
        return self.value

    @property
    def color_role(self) -> StyleRole:
        """Return the semantic color role associated with this severity."""
        return _COLOR_ROLES[self]

    @property
    def rank(self) -> int:
        """Return the declaration rank (0 for ERROR, the most severe)."""
        return _RANKS[self]

    @classmethod
    def parse(cls, value: Severity | str) -> Severity:
        """Return the severity for ``value``.

        Args:
            value (Severity | str): A severity, or its label (case-insensitive).

        Returns:
            Severity: The matching member.

        Raises:
            TypeError: If ``value`` is neither a `Severity` nor a string.
            ValueError: If ``value`` is not a known severity label.
        """
        if isinstance(value, Severity):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Severity must be a Severity or a label string, got {type(value).__name__}")
        key: str = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown severity: {value!r} (expected one of: error, warning, info)")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.label


_COLOR_ROLES: dict[Severity, StyleRole] = {
    Severity.ERROR: StyleRole.BRIGHT_RED,
    Severity.WARNING: StyleRole.BRIGHT_YELLOW,
    Severity.INFO: StyleRole.BRIGHT_BLUE,
}

_RANKS: dict[Severity, int] = {member: rank for rank, member in enumerate(Severity)}
