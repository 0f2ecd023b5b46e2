from __future__ import annotations

import re
from enum import Enum

# Signed 64-bit range; larger whole numbers fall through to the float rule.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?: [0-9]+ \. [0-9]*     # 3.  3.14
      | \. [0-9]+            # .5
      | [0-9]+               # 1e5, padded or out-of-range whole numbers
    )
    (?: [eE] [+-]? [0-9]+ )?
    """,
    re.VERBOSE,
)


class Category(Enum):
    # value = output file base name
    INTEGERS = "integers"
    FLOATS = "floats"
    STRINGS = "strings"

    @property
    def base_name(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_numeric(self) -> bool:
        return self is not Category.STRINGS


_LABELS = {
    Category.INTEGERS: "Integers",
    Category.FLOATS: "Floats",
    Category.STRINGS: "Strings",
}

# Fixed processing order for writing and reporting
CATEGORY_ORDER: tuple[Category, ...] = (Category.INTEGERS, Category.FLOATS, Category.STRINGS)


# Longest magnitude that can still fit in 64 bits, checked before int()
_INT_DIGITS = len(str(INT_MAX))


def parse_int(line: str) -> int | None:
    """Return the integer value of a whole line, or None."""
    if not _INT_RE.fullmatch(line):
        return None
    if len(line.lstrip("+-").lstrip("0")) > _INT_DIGITS:
        return None
    n = int(line)
    if n < INT_MIN or n > INT_MAX:
        return None
    return n


def parse_float(line: str) -> float | None:
    """
    Return the float value of a decimal/exponential literal, or None.

    Surrounding whitespace is tolerated, the way float() itself trims it.
    """
    text = line.strip()
    if not _FLOAT_RE.fullmatch(text):
        return None
    return float(text)


def classify(line: str) -> tuple[Category, int | float | str]:
    """
    Classify one line of text.

    Integer first, then float, else string. The integer rule needs the
    whole line to be digits; the float rule also accepts a padded literal,
    so " 42" is the float 42.0. The empty line is a string.
    """
    n = parse_int(line)
    if n is not None:
        return Category.INTEGERS, n

    x = parse_float(line)
    if x is not None:
        return Category.FLOATS, x

    return Category.STRINGS, line
