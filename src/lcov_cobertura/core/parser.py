"""Single-pass LCOV tracefile parser.

The parser walks the tracefile line by line, accumulating per-file counters
until ``end_of_record`` folds them into the owning package and the global
summary. Malformed records never abort parsing: bad hit counts count as
uncovered and records outside an ``SF`` block are dropped.
"""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lcov_cobertura._meta import logger
from lcov_cobertura.core._util import is_positive, parse_int
from lcov_cobertura.core.config import ParseOptions
from lcov_cobertura.core.model import (
    ClassCoverage,
    CoverageModel,
    LineRecord,
    MethodRecord,
    PackageCoverage,
    Totals,
)
from lcov_cobertura.core.rates import format_rate

if TYPE_CHECKING:
    from collections.abc import Iterable

END_OF_RECORD = "end_of_record"
NOT_TAKEN = "-"


@dataclass(slots=True)
class _OpenFile:
    """Accumulators for the ``SF`` block currently being read."""

    package: str
    filename: str
    totals: Totals = field(default_factory=Totals)
    lines: dict[int, LineRecord] = field(default_factory=dict)
    methods: dict[str, MethodRecord] = field(default_factory=dict)
    # methods whose line came from an FN record rather than an FNDA default
    declared: set[str] = field(default_factory=set)

    def line(self, number: int) -> LineRecord:
        record = self.lines.get(number)
        if record is None:
            record = self.lines[number] = LineRecord()
        return record


def split_source_path(base_dir: str, path: str) -> tuple[str, str, str]:
    """Return ``(filename, package, class_name)`` for an ``SF`` path.

    *path* is appended to *base_dir* even when absolute, then normalised.
    """
    joined = os.sep.join(part for part in (base_dir, path) if part)
    filename = os.path.normpath(joined) if joined else ""
    parts = filename.split(os.sep)
    return filename, ".".join(parts[:-1]), ".".join(parts)


def _split_tag(line: str) -> tuple[str, str]:
    tag, _, value = line.partition(":")
    return tag.strip(), value.strip()


class _TracefileParser:
    def __init__(self, options: ParseOptions) -> None:
        self.options = options
        self.model = CoverageModel(timestamp=str(int(time.time())))
        self.current: _OpenFile | None = None

    # ------------------------------------------------------------------ #
    # record handlers                                                    #
    # ------------------------------------------------------------------ #

    def _source_file(self, value: str) -> None:
        filename, package, class_name = split_source_path(self.options.base_dir, value)
        pkg = self.model.packages.get(package)
        if pkg is None:
            pkg = self.model.packages[package] = PackageCoverage()
        pkg.classes[filename] = ClassCoverage(name=class_name)
        self.current = _OpenFile(package=package, filename=filename)

    def _line_data(self, cur: _OpenFile, value: str) -> None:
        number_raw, _, rest = value.partition(",")
        hits_raw = rest.split(",", 1)[0]
        cur.totals.lines_total += 1
        number = parse_int(number_raw)
        if number is None:
            logger.debug("DA record without a line number: %r", value)
            return
        record = cur.line(number)
        hits = parse_int(hits_raw)
        if hits is not None and hits > 0:
            record.hits = hits
            cur.totals.lines_covered += 1

    def _branch_data(self, cur: _OpenFile, value: str) -> None:
        fields = value.split(",")
        number = parse_int(fields[0])
        if number is None:
            logger.debug("BRDA record without a line number: %r", value)
            return
        taken = fields[3] if len(fields) > 3 else NOT_TAKEN  # noqa: PLR2004
        record = cur.line(number)
        record.branch = True
        record.branches_total += 1
        cur.totals.branches_total += 1
        if taken != NOT_TAKEN and is_positive(taken):
            record.branches_covered += 1
            cur.totals.branches_covered += 1

    def _function(self, cur: _OpenFile, value: str) -> None:
        line, _, name = value.partition(",")
        method = cur.methods.get(name)
        if method is None:
            cur.methods[name] = MethodRecord(line=line)
        elif name not in cur.declared:
            method.line = line
        cur.declared.add(name)

    def _function_data(self, cur: _OpenFile, value: str) -> None:
        hits, _, name = value.partition(",")
        method = cur.methods.get(name)
        if method is None:
            method = cur.methods[name] = MethodRecord()
        method.hits = hits

    def _override(self, cur: _OpenFile, attr: str, value: str) -> None:
        count = parse_int(value)
        if count is None:
            logger.debug("ignoring non-numeric branch summary %r", value)
            return
        setattr(cur.totals, attr, count)

    def _end_of_record(self) -> None:
        cur = self.current
        if cur is None:
            logger.debug("end_of_record without an open source file")
            return
        pkg = self.model.packages[cur.package]
        pkg.add(cur.totals)
        self.model.summary.add(cur.totals)

        cls = pkg.classes[cur.filename]
        cls.lines = dict(cur.lines)
        cls.methods = dict(cur.methods)
        cls.lines_total = cur.totals.lines_total
        cls.lines_covered = cur.totals.lines_covered
        cls.branches_total = cur.totals.branches_total
        cls.branches_covered = cur.totals.branches_covered
        self.current = None

    # ------------------------------------------------------------------ #
    # driver                                                             #
    # ------------------------------------------------------------------ #

    def feed(self, line: str) -> None:
        if line.strip() == END_OF_RECORD:
            self._end_of_record()
            return

        tag, value = _split_tag(line)
        if tag == "SF":
            self._source_file(value)
            return

        cur = self.current
        if cur is None:
            if tag:
                logger.debug("ignoring %s record outside of a source file", tag)
            return

        if tag == "DA":
            self._line_data(cur, value)
        elif tag == "BRDA":
            self._branch_data(cur, value)
        elif tag == "BRF":
            self._override(cur, "branches_total", value)
        elif tag == "BRH":
            self._override(cur, "branches_covered", value)
        elif tag == "FN":
            self._function(cur, value)
        elif tag == "FNDA":
            self._function_data(cur, value)

    def finish(self) -> CoverageModel:
        # re.compile hands back already compiled patterns unchanged
        excludes = [re.compile(pattern) for pattern in self.options.excludes]
        packages = self.model.packages
        for name in [name for name in packages if _is_excluded(name, excludes)]:
            logger.debug("excluding package %r", name)
            # summary deliberately keeps the excluded package's totals
            del packages[name]

        for pkg in packages.values():
            pkg.line_rate = format_rate(pkg.lines_total, pkg.lines_covered)
            pkg.branch_rate = format_rate(pkg.branches_total, pkg.branches_covered)
        return self.model


def _is_excluded(package: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    return any(pattern.search(package) for pattern in patterns)


def parse_lcov(text: str, options: ParseOptions | None = None) -> CoverageModel:
    """Parse LCOV tracefile *text* into a :class:`CoverageModel`.

    Packages whose name matches any of ``options.excludes`` are removed from
    the result, but the summary still counts them.
    """
    parser = _TracefileParser(options or ParseOptions())
    for line in text.split("\n"):
        parser.feed(line)
    model = parser.finish()
    logger.debug(
        "parsed %d package(s), %d/%d lines covered",
        len(model.packages),
        model.summary.lines_covered,
        model.summary.lines_total,
    )
    return model


__all__ = ["parse_lcov", "split_source_path"]
