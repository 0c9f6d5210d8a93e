"""Central configuration and constants for ``lcov_cobertura``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

DEFAULT_BASE_DIR = "."

# Cobertura report header values expected by downstream consumers.
COBERTURA_VERSION = "2.0.3"
COBERTURA_DTD = "http://cobertura.sourceforge.net/xml/coverage-04.dtd"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Options controlling how a tracefile is folded into a coverage model."""

    base_dir: str = DEFAULT_BASE_DIR
    # regular expressions, as text or precompiled; a package is dropped when any of them
    # matches its name
    excludes: tuple[str | re.Pattern[str], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    base_dir: str = DEFAULT_BASE_DIR


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    """Everything the file-to-file conversion needs."""

    base_dir: str = DEFAULT_BASE_DIR
    excludes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def parse(self) -> ParseOptions:
        return ParseOptions(base_dir=self.base_dir, excludes=self.excludes)

    @property
    def render(self) -> RenderOptions:
        return RenderOptions(base_dir=self.base_dir)


__all__ = [
    "COBERTURA_DTD",
    "COBERTURA_VERSION",
    "DEFAULT_BASE_DIR",
    "LOG_FORMAT",
    "ConvertOptions",
    "ParseOptions",
    "RenderOptions",
]
