# output_manager.py

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from typesplit.utility import FileWriteError, reason_of, strip_ansi


def resolve_output_path(path: str, base_dir: str | Path) -> Path:
    """
    Resolve a user-provided path.

    Rules:
    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to base_dir
    """
    if not path:
        raise ValueError("Output path is empty")

    # Expand ~ (Linux/macOS + works on Windows too)
    path = os.path.expanduser(path)

    # Absolute path → keep
    if os.path.isabs(path):
        return Path(os.path.normpath(path))

    return Path(os.path.normpath(os.path.join(base_dir, path)))


def format_value(value: int | float | str) -> str:
    """Canonical text for one value: ints in base 10, floats in shortest round-trip form, strings verbatim."""
    return str(value)


def write_category(output_dir: str | Path, file_name: str, values: Iterable, append: bool) -> Path:
    """
    Persist one category as newline-delimited text and return the file path.

    append=False deletes an existing file first, then writes all values.
    append=True adds the values after any existing content (creating the file
    if needed). Any OS failure raises FileWriteError with the offending path.
    """
    directory = Path(output_dir)
    target = directory / file_name

    if not directory.is_dir():
        raise FileWriteError(target, f"output directory {directory} does not exist")

    if not append and target.exists():
        try:
            target.unlink()
        except OSError as e:
            raise FileWriteError(target, f"cannot delete existing file ({reason_of(e)})") from e

    mode = "a" if append else "w"
    try:
        with target.open(mode, encoding="utf-8", newline="\n") as fh:
            for value in values:
                fh.write(format_value(value))
                fh.write("\n")
    except OSError as e:
        raise FileWriteError(target, reason_of(e)) from e

    return target


class OutputManager:
    """
    Diagnostic sink for statistics and messages, screen and/or report file.

    Usage:
        om = OutputManager()                            # screen only
        om = OutputManager(quiet=True)                  # capture only (tests)
        om = OutputManager(report_file="stats.log")     # screen + appended file
        om.write("Count: 3")
        om.getvalue()                                   # everything written
        om.close()
    """

    def __init__(self, report_file: str | Path | None = None, quiet: bool = False):
        """
        Parameters:
            report_file: None => screen only; otherwise every write() is also
                appended (ANSI stripped) to this file.
            quiet: if True, no output to screen (buffer and file still filled)
        """
        self.quiet = quiet
        self.report_file = Path(report_file) if report_file else None
        self._buffer: list[str] = []

        if self.report_file is not None:
            # Ensure parent folder exists (e.g. "logs/stats.txt")
            parent = self.report_file.parent
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FileWriteError(self.report_file, reason_of(e)) from e

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and report file (if configured)."""
        text = sep.join(str(a) for a in args) + end
        self._buffer.append(text)

        # Screen
        if not self.quiet:
            print(text, end="")

        # File handling: always use a context manager, one append per call
        if self.report_file is not None:
            try:
                with self.report_file.open("a", encoding="utf-8") as fh:
                    fh.write(strip_ansi(text))
            except OSError as e:
                raise FileWriteError(self.report_file, reason_of(e)) from e

    def getvalue(self) -> str:
        """Returns everything written (with color codes)."""
        return "".join(self._buffer)

    def plain(self) -> str:
        """Returns everything written, ANSI stripped."""
        return strip_ansi(self.getvalue())

    def close(self) -> None:
        """Add a separator between runs in the report file."""
        if self.report_file is not None and self._buffer:
            try:
                with self.report_file.open("a", encoding="utf-8") as fh:
                    fh.write("\n")  # one empty line between runs
            except OSError as e:
                raise FileWriteError(self.report_file, reason_of(e)) from e
