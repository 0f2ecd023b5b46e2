# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from pathlib import Path

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class UserInputError(Exception):
    pass


class ConfigurationError(UserInputError):
    """Resolved options are unusable (raised by the CLI layer only)."""


class FileReadError(Exception):
    """An input file is missing, unreadable or not valid text."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read input file {self.path}: {reason}")


class FileWriteError(Exception):
    """An output file could not be deleted, created or appended to."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write output file {self.path}: {reason}")


def strip_ansi(s: str | None) -> str:
    """Return s with ANSI escape sequences removed."""
    return "" if s is None else ANSI_RE.sub("", s)


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out


def reason_of(e: BaseException) -> str:
    """Short, path-free description of an OS error for user messages."""
    return getattr(e, "strerror", None) or e.__class__.__name__
