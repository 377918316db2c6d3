# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Rendering helpers for CliReport.

This package keeps styled-text primitives separate from the report model.

Public modules:
    - clireport.rendering.fragment
    - clireport.rendering.styles
"""

from __future__ import annotations
