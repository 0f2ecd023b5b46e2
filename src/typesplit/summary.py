from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typesplit.classify import Category
from typesplit.context import Verbosity


@dataclass(frozen=True)
class StatisticsReport:
    category: Category
    count: int
    # numeric categories, full verbosity
    total: float | None = None
    mean: float | None = None
    # string category, full verbosity
    min_length: int | None = None
    max_length: int | None = None


def summarize(category: Category, values: Sequence, verbosity: Verbosity) -> StatisticsReport | None:
    """
    Build the statistics report for one category.

    Returns None for an empty category; callers skip both the write and the
    report in that case. Numeric sums widen every value to float before
    accumulating, so large integer buckets never overflow.
    """
    count = len(values)
    if count == 0:
        return None

    if verbosity is Verbosity.SHORT:
        return StatisticsReport(category=category, count=count)

    if category.is_numeric:
        total = sum((float(v) for v in values), 0.0)
        return StatisticsReport(category=category, count=count, total=total, mean=total / count)

    lengths = [len(s) for s in values]
    return StatisticsReport(
        category=category,
        count=count,
        min_length=min(lengths),
        max_length=max(lengths),
    )
