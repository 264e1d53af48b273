"""Terminal text styles and shared display constants."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

SIGNATURE = "\n\u2728 H2M \u2728\n"

FG_RED, FG_GREEN, FG_YELLOW, FG_CYAN, BOLD = 31, 32, 33, 36, 1


@dataclass(frozen=True)
class Style:
    """A set of ANSI attributes applied to printed text."""

    codes: tuple[int, ...]
    enabled: bool | None = None

    @property
    def active(self) -> bool:
        if self.enabled is not None:
            return self.enabled
        if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
            return False
        return bool(getattr(sys.stdout, "isatty", lambda: False)())

    def sprint(self, *args) -> str:
        """Join the arguments and wrap them in this style's escape codes."""
        # A space separates two operands only when neither is a string.
        text = "".join(
            (" " if i and not isinstance(arg, str) and not isinstance(args[i - 1], str) else "") + str(arg)
            for i, arg in enumerate(args)
        )
        if not self.active:
            return text
        return f"\x1b[{';'.join(map(str, self.codes))}m{text}\x1b[0m"


TITLE = Style((FG_CYAN, BOLD))
COMMAND = Style((FG_GREEN,))
ERROR = Style((FG_RED, BOLD))
HELP = Style((FG_YELLOW,))