from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("typesplit")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .classify import Category, classify
from .context import RunConfig, Verbosity
from .dataio import Buckets, aggregate
from .output_manager import OutputManager, write_category
from .pipeline import RunResult, run
from .summary import StatisticsReport, summarize
from .utility import ConfigurationError, FileReadError, FileWriteError, UserInputError

__all__ = [
    "Buckets",
    "Category",
    "ConfigurationError",
    "FileReadError",
    "FileWriteError",
    "OutputManager",
    "RunConfig",
    "RunResult",
    "StatisticsReport",
    "UserInputError",
    "Verbosity",
    "__version__",
    "aggregate",
    "classify",
    "run",
    "summarize",
    "write_category",
]
