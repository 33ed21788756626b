from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DedupeConfig:
    encoding: str = "utf-8"
    output_path: str | None = None  # None overwrites the input file
    dry_run: bool = False
