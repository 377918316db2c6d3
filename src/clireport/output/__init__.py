# clireport:header:start
#
#   project      : CliReport
#   file         : __init__.py
#   file_relpath : src/clireport/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Console output for rendered reports.

Public modules:
    - clireport.output.color
    - clireport.output.console
    - clireport.output.console_std
    - clireport.output.display
"""

from __future__ import annotations
