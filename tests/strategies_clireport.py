# clireport:header:start
#
#   project      : CliReport
#   file         : strategies_clireport.py
#   file_relpath : tests/strategies_clireport.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

# pyright: strict

"""Hypothesis strategies for generating report entries.

Generated text never contains newlines so that rendered rows can be split
reliably; everything else (empty strings, unicode, brackets) is fair game.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from clireport import Severity, TokenInfo

EXCLUDED_CATEGORIES: tuple[Any, ...] = ("Cs",)


def s_single_line_text(max_size: int = 24) -> st.SearchStrategy[str]:
    """Text without newlines or surrogates."""
    return st.text(
        alphabet=st.characters(
            exclude_categories=EXCLUDED_CATEGORIES,
            exclude_characters="\n",
        ),
        max_size=max_size,
    )


def s_properties(max_rows: int = 8) -> st.SearchStrategy[list[tuple[str, str]]]:
    """Lists of (name, value) pairs, duplicates allowed."""
    return st.lists(
        st.tuples(s_single_line_text(12), s_single_line_text()),
        max_size=max_rows,
    )


@st.composite
def s_token_info(draw: st.DrawFn) -> TokenInfo:
    """Token call-outs whose token lies within the line text."""
    line_text: str = draw(s_single_line_text(40))
    position: int = draw(st.integers(min_value=0, max_value=len(line_text)))
    token_len: int = draw(st.integers(min_value=0, max_value=len(line_text) - position))
    return TokenInfo(
        file_name=draw(s_single_line_text(16)),
        line=draw(st.integers(min_value=1, max_value=10**6)),
        position=position,
        line_text=line_text,
        token_len=token_len,
        severity=draw(st.sampled_from(list(Severity))),
        message=draw(s_single_line_text()),
    )
