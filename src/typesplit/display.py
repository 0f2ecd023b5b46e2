# src/typesplit/display.py
from __future__ import annotations

from colorama import Fore, Style

from typesplit.runtime import current as _rt_current
from typesplit.summary import StatisticsReport

ALIGN_WIDTH = 22  # label column


def _c(color: str, text: str) -> str:
    if not _rt_current().color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def _fmt_num(x: float) -> str:
    return repr(float(x))


def report_lines(report: StatisticsReport) -> list[tuple[str, str]]:
    """(label, value) rows for a report, in display order."""
    rows = [("Count", str(report.count))]
    if report.total is not None:
        rows.append(("Sum", _fmt_num(report.total)))
        rows.append(("Mean", _fmt_num(report.mean)))
    if report.min_length is not None:
        rows.append(("Min string length", str(report.min_length)))
        rows.append(("Max string length", str(report.max_length)))
    return rows


def print_report(report: StatisticsReport, om) -> None:
    """
    Print one statistics block to the diagnostic sink:

        Statistics for Integers:
          Count ............... 2
          Sum ................. 35.0
          Mean ................ 17.5
    """
    om.write(_c(Fore.YELLOW + Style.BRIGHT, f"Statistics for {report.category.label}:"))
    for label, value in report_lines(report):
        om.write(f"  {label + ' ':.<{ALIGN_WIDTH}} {_c(Fore.GREEN, value)}")


def print_profiles_with_descriptions(items: list[tuple[str, str]]) -> None:
    if not items:
        print("No profiles found.")
        return
    width = max(len(name) for name, _ in items)
    for name, desc in items:
        print(f"{_c(Fore.CYAN, name.ljust(width))}  {desc}")
