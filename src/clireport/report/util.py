# clireport:header:start
#
#   project      : CliReport
#   file         : util.py
#   file_relpath : src/clireport/report/util.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Layout helpers shared by report entries."""

from __future__ import annotations

from typing import Final

from clireport.rendering.fragment import ACCENT, Fragment

ARROW: Final[str] = "-->"
VERTICAL: Final[str] = " | "


def repeat(char: str, count: int) -> str:
    """Return ``char`` repeated ``count`` times (empty for ``count <= 0``)."""
    return char * max(count, 0)


def padding(count: int) -> Fragment:
    """Return a plain fragment of ``count`` spaces."""
    return Fragment.plain(repeat(" ", count))


def arrow() -> Fragment:
    """Return the accent-colored ``-->`` marker."""
    return Fragment(ARROW, ACCENT)


def vertical() -> Fragment:
    """Return the accent-colored vertical bar with its surrounding spaces."""
    return Fragment(VERTICAL, ACCENT)


def file_and_token(file_name: str, line: int, position: int) -> Fragment:
    """Return the file location suffix of a token call-out.

    Args:
        file_name (str): File name as given by the caller.
        line (int): 1-indexed line number.
        position (int): 0-indexed character position; shown 1-indexed.

    Returns:
        Fragment: Plain fragment like `` a.txt [line=3, position=5]``.
    """
    return Fragment.plain(f" {file_name} [line={line}, position={position + 1}]")
