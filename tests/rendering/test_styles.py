# clireport:header:start
#
#   project      : CliReport
#   file         : test_styles.py
#   file_relpath : tests/rendering/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Stylers: plain output, palette lookup and overrides."""

from __future__ import annotations

from clireport import ChalkStyler, Fragment, PlainStyler, StyleRole
from clireport.rendering.styles import default_palette
from tests.conftest import parametrize, tag_palette


@parametrize("role", list(StyleRole))
def test_plain_styler_ignores_roles(role: StyleRole) -> None:
    """PlainStyler returns raw text for every role."""
    assert PlainStyler()(Fragment("text", role)) == "text"


def test_default_palette_covers_styled_roles() -> None:
    """Every role except NORMAL has a yachalk colorizer."""
    palette = default_palette()
    assert set(palette) == set(StyleRole) - {StyleRole.NORMAL}
    assert all(callable(c) for c in palette.values())


def test_chalk_styler_applies_palette() -> None:
    """Each role is rendered with its palette entry."""
    styler = ChalkStyler(tag_palette())
    assert styler(Fragment("x", StyleRole.BRIGHT_RED)) == "<bright_red>x</bright_red>"
    assert styler(Fragment("y", StyleRole.EMPHASIS)) == "<emphasis>y</emphasis>"


def test_chalk_styler_leaves_unmapped_roles_plain() -> None:
    """NORMAL is not in the default palette and stays unstyled."""
    assert ChalkStyler()(Fragment.plain("plain")) == "plain"


def test_chalk_styler_skips_empty_text() -> None:
    """Empty fragments never get escape sequences."""
    styler = ChalkStyler(tag_palette())
    assert styler(Fragment("", StyleRole.BRIGHT_BLUE)) == ""


def test_palette_overrides_merge_with_defaults() -> None:
    """Overrides replace single roles and keep the others."""
    styler = ChalkStyler({StyleRole.BRIGHT_RED: lambda *a, sep=" ": "RED"})
    assert styler(Fragment("boom", StyleRole.BRIGHT_RED)) == "RED"
    assert set(styler.palette) == set(default_palette())
    assert "bright_red" in repr(styler)
