# clireport:header:start
#
#   project      : CliReport
#   file         : styles.py
#   file_relpath : src/clireport/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Role-to-style mapping for rendered fragments.

Report types only produce `Fragment` objects with semantic roles. A *styler*
turns each fragment into output text at the boundary:

- `PlainStyler` drops all styling (files, pipes, ``NO_COLOR``).
- `ChalkStyler` applies `yachalk` colorizers looked up from a palette.

Any callable matching the `Styler` protocol can be passed to
`Report.render()`, which keeps the report model independent of a specific
color library.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from yachalk import chalk

from clireport.rendering.fragment import StyleRole

if TYPE_CHECKING:
    from clireport.rendering.fragment import Fragment


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list
    of arguments and a `sep` keyword. CliReport calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments."""
        ...


class Styler(Protocol):
    """Callable that renders one fragment to output text."""

    def __call__(self, fragment: Fragment) -> str:
        """Return the styled text for ``fragment``."""
        ...


class PlainStyler:
    """Styler that ignores roles and returns the raw fragment text."""

    def __call__(self, fragment: Fragment) -> str:
        """Return ``fragment.text`` unchanged."""
        return fragment.text

    def __repr__(self) -> str:
        return "PlainStyler()"


def default_palette() -> Mapping[StyleRole, Colorizer]:
    """Return the default `yachalk` palette.

    ``StyleRole.NORMAL`` is absent on purpose: unmapped roles are left unstyled.

    Returns:
        Mapping[StyleRole, Colorizer]: Read-only role to colorizer mapping.
    """
    return MappingProxyType(
        {
            StyleRole.EMPHASIS: chalk.bold.white_bright,
            StyleRole.BRIGHT_RED: chalk.red_bright,
            StyleRole.BRIGHT_YELLOW: chalk.yellow_bright,
            StyleRole.BRIGHT_BLUE: chalk.blue_bright,
        }
    )


class ChalkStyler:
    """Styler backed by `yachalk` colorizers.

    Args:
        palette (Mapping[StyleRole, Colorizer] | None): Optional overrides merged on
            top of [`default_palette`][clireport.rendering.styles.default_palette].
            Roles missing from the merged palette render unstyled.
    """

    def __init__(self, palette: Mapping[StyleRole, Colorizer] | None = None) -> None:
        merged: dict[StyleRole, Colorizer] = dict(default_palette())
        if palette:
            merged.update(palette)
        self._palette: Mapping[StyleRole, Colorizer] = MappingProxyType(merged)

    @property
    def palette(self) -> Mapping[StyleRole, Colorizer]:
        """Return the effective role to colorizer mapping."""
        return self._palette

    def __call__(self, fragment: Fragment) -> str:
        """Return ``fragment.text`` decorated according to its role.

        Empty text is returned as-is so that empty segments do not emit bare
        escape sequences.
        """
        if not fragment.text:
            return fragment.text
        colorizer: Colorizer | None = self._palette.get(fragment.role)
        if colorizer is None:
            return fragment.text
        return colorizer(fragment.text)

    def __repr__(self) -> str:
        roles: str = ", ".join(role.value for role in self._palette)
        return f"ChalkStyler(roles=[{roles}])"
