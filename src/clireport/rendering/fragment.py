# clireport:header:start
#
#   project      : CliReport
#   file         : fragment.py
#   file_relpath : src/clireport/rendering/fragment.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Styled text fragments.

A report renders to an ordered list of `Fragment` objects, each pairing a piece
of text with a semantic `StyleRole`. Roles describe *intent* (emphasis, accent,
severity color) rather than terminal escape codes; the translation to concrete
styles happens in [`clireport.rendering.styles`][] at the output boundary.

This module must stay free of color libraries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StyleRole(Enum):
    """Semantic styling intent of a fragment.

    Attributes:
        NORMAL: Plain, unstyled text.
        EMPHASIS: Bold bright-white text (report messages).
        BRIGHT_RED: Error color.
        BRIGHT_YELLOW: Warning color.
        BRIGHT_BLUE: Info color, also used as the accent for call-out markers.
    """

    NORMAL = "normal"
    EMPHASIS = "emphasis"
    BRIGHT_RED = "bright_red"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"


# Markers in token call-outs (arrow, vertical bar, line number).
ACCENT: StyleRole = StyleRole.BRIGHT_BLUE


@dataclass(frozen=True, slots=True)
class Fragment:
    """A piece of text with its semantic style role."""

    text: str
    role: StyleRole = StyleRole.NORMAL

    @classmethod
    def plain(cls, text: str) -> Fragment:
        """Return an unstyled fragment."""
        return cls(text, StyleRole.NORMAL)

    def __str__(self) -> str:
        return self.text


NEWLINE: Fragment = Fragment.plain("\n")


def plain_text(fragments: list[Fragment]) -> str:
    """Concatenate the text of ``fragments`` without any styling.

    Args:
        fragments (list[Fragment]): Fragments to join, in order.

    Returns:
        str: The joined text.
    """
    return "".join(f.text for f in fragments)
