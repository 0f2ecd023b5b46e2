from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Verbosity(Enum):
    SHORT = "short"
    FULL = "full"

    @classmethod
    def parse(cls, value: str) -> Verbosity:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown statistics mode {value!r} (expected 'short' or 'full')") from None


@dataclass(frozen=True)
class RunConfig:
    # --- non-default fields FIRST ---
    input_paths: tuple[Path, ...]    # read strictly in this order
    output_dir: Path

    # --- fields WITH defaults ---
    prefix: str = ""
    append: bool = False
    verbosity: Verbosity = Verbosity.FULL

    def output_name(self, base_name: str) -> str:
        return f"{self.prefix}{base_name}.txt"
