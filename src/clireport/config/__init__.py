# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Runtime configuration for CliReport (logging and environment lookups)."""

from __future__ import annotations
