# clireport:header:start
#
#   project      : CliReport
#   file         : entry.py
#   file_relpath : src/clireport/report/entry.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Report entries: blocks of detail attached below a report header.

An entry is anything that can produce an ordered list of fragments. The two
built-in kinds are [`Properties`][clireport.report.properties.Properties] and
[`TokenInfo`][clireport.report.token_info.TokenInfo]; new kinds only need a
``build()`` method and are accepted by `Report` without changes.

For convenience, `Report` also accepts an already built fragment sequence.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeAlias, runtime_checkable

from clireport.rendering.fragment import Fragment


@runtime_checkable
class Entry(Protocol):
    """Producer of a report entry's fragments.

    Implementations must be pure: calling ``build()`` repeatedly returns equal
    fragment lists and does not mutate the entry.
    """

    def build(self) -> list[Fragment]:
        """Return the entry's fragments in display order."""
        ...


EntryLike: TypeAlias = "Entry | Iterable[Fragment]"


def as_fragments(entry: EntryLike) -> list[Fragment]:
    """Return the fragments of ``entry`` as a new list.

    Args:
        entry (EntryLike): An `Entry`, or an iterable of `Fragment` objects.

    Returns:
        list[Fragment]: A fresh list owned by the caller.

    Raises:
        TypeError: If ``entry`` is neither an `Entry` nor an iterable of fragments.
    """
    if isinstance(entry, Entry):
        return list(entry.build())
    if isinstance(entry, (str, bytes)) or not isinstance(entry, Iterable):
        raise TypeError(
            f"Expected an Entry or an iterable of Fragment, got {type(entry).__name__}"
        )
    fragments: list[Fragment] = list(entry)
    for item in fragments:
        if not isinstance(item, Fragment):
            raise TypeError(f"Entry items must be Fragment instances, got {type(item).__name__}")
    return fragments
