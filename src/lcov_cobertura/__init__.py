"""Convert LCOV tracefiles into Cobertura XML reports."""

from lcov_cobertura._meta import __version__, logger
from lcov_cobertura.core import (
    CoverageModel,
    ParseOptions,
    RenderOptions,
    format_rate,
    generate_cobertura_xml,
    parse_lcov,
)

__all__ = [
    "CoverageModel",
    "ParseOptions",
    "RenderOptions",
    "__version__",
    "format_rate",
    "generate_cobertura_xml",
    "logger",
    "parse_lcov",
]
