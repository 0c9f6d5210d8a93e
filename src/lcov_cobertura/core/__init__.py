from __future__ import annotations

from lcov_cobertura.core.config import ConvertOptions, ParseOptions, RenderOptions
from lcov_cobertura.core.model import (
    ClassCoverage,
    CoverageModel,
    LineRecord,
    MethodRecord,
    PackageCoverage,
    Summary,
)
from lcov_cobertura.core.parser import parse_lcov
from lcov_cobertura.core.rates import format_rate
from lcov_cobertura.core.serializer import generate_cobertura_xml

__all__ = [
    "ClassCoverage",
    "ConvertOptions",
    "CoverageModel",
    "LineRecord",
    "MethodRecord",
    "PackageCoverage",
    "ParseOptions",
    "RenderOptions",
    "Summary",
    "format_rate",
    "generate_cobertura_xml",
    "parse_lcov",
]
