# src/typesplit/dataio.py
from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from typesplit.classify import CATEGORY_ORDER, Category, classify
from typesplit.runtime import current as _rt_current
from typesplit.utility import FileReadError, reason_of


@dataclass
class Buckets:
    integers: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)

    def values(self, category: Category) -> list:
        if category is Category.INTEGERS:
            return self.integers
        if category is Category.FLOATS:
            return self.floats
        return self.strings

    def add(self, category: Category, value) -> None:
        self.values(category).append(value)

    def counts(self) -> dict[Category, int]:
        return {cat: len(self.values(cat)) for cat in CATEGORY_ORDER}


def read_lines(path: str | Path) -> list[str]:
    """
    Read a whole text file as a list of lines without terminators.

    Universal newlines: '\\n', '\\r\\n' and '\\r' all end a line.
    Raises FileReadError (with the path) on any OS or decoding failure.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]
    except UnicodeDecodeError as e:
        raise FileReadError(p, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(p, reason_of(e)) from e


def aggregate(paths: Iterable[str | Path]) -> Buckets:
    """
    Read every file in order and sort its lines into three buckets.

    File 1's lines land before file 2's; line order inside a file is kept.
    The first unreadable file aborts the whole aggregation.
    """
    debug = _rt_current().debug
    buckets = Buckets()
    for path in paths:
        lines = read_lines(path)
        for line in lines:
            category, value = classify(line)
            buckets.add(category, value)
        if debug:
            print(f"[debug] read {len(lines)} line(s) from {path}", file=sys.stderr)
    return buckets
