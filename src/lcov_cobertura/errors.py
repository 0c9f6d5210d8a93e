"""Centralised exception hierarchy for lcov-cobertura."""

from __future__ import annotations


class LcovCoberturaError(Exception):
    """Base class for all custom lcov-cobertura exceptions."""


class TracefileError(LcovCoberturaError):
    """Base class for errors related to LCOV tracefile handling."""


class TracefileNotFoundError(TracefileError):
    """LCOV tracefile could not be located on disk."""


class InvalidExcludePatternError(LcovCoberturaError):
    """An exclusion pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid exclude pattern {pattern!r}: {reason}")
        self.pattern = pattern


__all__ = [
    "InvalidExcludePatternError",
    "LcovCoberturaError",
    "TracefileError",
    "TracefileNotFoundError",
]
