"""Locations of the running program and of its project directory."""

from __future__ import annotations

import sys
from pathlib import Path


def executable_path() -> Path:
    """Return the directory holding the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(program).resolve().parent


def project_path() -> Path:
    """Return the directory two levels above the program's directory."""
    return executable_path().parent.parent