# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Core, UI-agnostic primitives for CliReport."""

from __future__ import annotations
