# SPDX-License-Identifier: MIT
"""Source locations for objects declared in user build scripts.

Targets, source sets and publications remember where they were created so
that errors such as naming conflicts can point back at the offending line.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

# Frames from files inside this directory are library internals.
_PACKAGE_DIR = str(Path(__file__).resolve().parent.parent) + os.sep


@dataclass(frozen=True)
class SourceLocation:
    """A position in a Python source file.

    Attributes:
        filename: Path of the source file.
        lineno: 1-based line number.
        function: Name of the enclosing function, if known.
    """

    filename: str
    lineno: int
    function: str | None = None

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


def get_caller_location() -> SourceLocation | None:
    """Return the location of the first frame outside the kmpp package.

    Returns:
        The location of the user code that called into kmpp, or None if
        no such frame exists (e.g. everything ran from inside kmpp).
    """
    frame = sys._getframe(1)
    while frame is not None:
        filename = frame.f_code.co_filename
        if not str(Path(filename).resolve()).startswith(_PACKAGE_DIR):
            return SourceLocation(filename, frame.f_lineno, frame.f_code.co_name)
        frame = frame.f_back
    return None
