# clireport:header:start
#
#   project      : CliReport
#   file         : color.py
#   file_relpath : src/clireport/output/color.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Color-mode resolution for report output.

These helpers are Click-free so they can be reused from any frontend or test.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from clireport.config.logging import get_logger

if TYPE_CHECKING:
    from clireport.config.logging import ClireportLogger


logger: ClireportLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stdout.isatty()`.

    Args:
        color_mode_override (ColorMode | None): Explicit mode; `None` or `AUTO`
            defers to the environment.
        stdout_isatty (bool | None): Optional override for TTY detection. When `None`,
            `sys.stdout.isatty()` is called, falling back to `False` on error.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.trace("Color forced on by FORCE_COLOR=%r", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.trace("Color disabled by NO_COLOR")
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
