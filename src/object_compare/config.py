"""Configuration dataclasses for object comparison."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


DEFAULT_LOADER_USER_AGENT = "object-compare/1.0"


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    include_deprecated: bool = False
    ignore_names: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls, include_deprecated: bool = False, ignore_names: Iterable[str] = ()
    ) -> "ComparisonConfig":
        if isinstance(ignore_names, str):
            ignore_names = (ignore_names,)
        return cls(include_deprecated=include_deprecated, ignore_names=frozenset(ignore_names))


@dataclass(slots=True)
class LoaderConfig:
    timeout: float = 10.0
    user_agent: str = DEFAULT_LOADER_USER_AGENT
    encoding: str = "utf-8"


@dataclass(slots=True)
class ReportConfig:
    output_path: Optional[str] = None
    json_output_path: Optional[str] = None
    max_mismatches: int = 50  # cap on rows rendered in the Markdown table
