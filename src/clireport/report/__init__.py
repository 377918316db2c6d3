# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Report model: code header, entries and the report aggregate."""

from __future__ import annotations

from clireport.report.code import Code
from clireport.report.entry import Entry, EntryLike, as_fragments
from clireport.report.properties import Properties
from clireport.report.report import Report
from clireport.report.token_info import TokenInfo

__all__ = [
    "Code",
    "Entry",
    "EntryLike",
    "Properties",
    "Report",
    "TokenInfo",
    "as_fragments",
]
