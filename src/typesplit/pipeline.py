from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from typesplit.classify import CATEGORY_ORDER, Category
from typesplit.context import RunConfig
from typesplit.dataio import aggregate
from typesplit.display import print_report
from typesplit.output_manager import OutputManager, write_category
from typesplit.runtime import current as _rt_current
from typesplit.summary import StatisticsReport, summarize


@dataclass
class RunResult:
    written: dict[Category, Path] = field(default_factory=dict)
    reports: list[StatisticsReport] = field(default_factory=list)


def run(config: RunConfig, om: OutputManager) -> RunResult:
    """
    Aggregate all inputs, then write and summarize each non-empty category.

    Categories are handled in the fixed order integers, floats, strings.
    FileReadError aborts before anything is written; FileWriteError aborts
    mid-way and leaves files of earlier categories on disk.
    """
    debug = _rt_current().debug
    buckets = aggregate(config.input_paths)
    result = RunResult()
    if debug:
        tally = ", ".join(f"{cat.base_name}={n}" for cat, n in buckets.counts().items())
        print(f"[debug] classified: {tally}", file=sys.stderr)

    for category in CATEGORY_ORDER:
        values = buckets.values(category)
        if not values:
            if debug:
                print(f"[debug] {category.base_name}: empty, skipped", file=sys.stderr)
            continue

        path = write_category(config.output_dir, config.output_name(category.base_name), values, config.append)
        result.written[category] = path
        if debug:
            mode = "appended" if config.append else "wrote"
            print(f"[debug] {category.base_name}: {mode} {len(values)} value(s) to {path}", file=sys.stderr)

        report = summarize(category, values, config.verbosity)
        result.reports.append(report)
        print_report(report, om)

    return result
