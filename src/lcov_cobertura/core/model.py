"""In-memory coverage model produced by the LCOV parser.

All mappings are plain ``dict`` objects; their insertion order is the order in
which the parser first saw each package, file and method, and the serializer
relies on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class LineRecord:
    branch: bool = False
    hits: int = 0
    branches_total: int = 0
    branches_covered: int = 0


@dataclass(slots=True)
class MethodRecord:
    # kept as raw tracefile tokens; only interpreted when rendering
    line: str = "0"
    hits: str = "0"


@dataclass(slots=True)
class Totals:
    lines_total: int = 0
    lines_covered: int = 0
    branches_total: int = 0
    branches_covered: int = 0

    def add(self, other: Totals) -> None:
        self.lines_total += other.lines_total
        self.lines_covered += other.lines_covered
        self.branches_total += other.branches_total
        self.branches_covered += other.branches_covered


@dataclass(slots=True)
class Summary(Totals):
    """Totals across every parsed file, excluded packages included."""


@dataclass(slots=True)
class ClassCoverage(Totals):
    """One source file (``SF`` record)."""

    name: str = ""
    lines: dict[int, LineRecord] = field(default_factory=dict)
    methods: dict[str, MethodRecord] = field(default_factory=dict)


@dataclass(slots=True)
class PackageCoverage(Totals):
    """Source files grouped by directory."""

    classes: dict[str, ClassCoverage] = field(default_factory=dict)
    line_rate: str = ""
    branch_rate: str = ""


@dataclass(slots=True)
class CoverageModel:
    packages: dict[str, PackageCoverage] = field(default_factory=dict)
    summary: Summary = field(default_factory=Summary)
    timestamp: str = ""


__all__ = [
    "ClassCoverage",
    "CoverageModel",
    "LineRecord",
    "MethodRecord",
    "PackageCoverage",
    "Summary",
    "Totals",
]
