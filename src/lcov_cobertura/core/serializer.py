"""Render a :class:`CoverageModel` as a Cobertura XML document."""

from __future__ import annotations

import xml.etree.ElementTree as ET  # noqa: S405 - output only, nothing is parsed here
from typing import TYPE_CHECKING

from lcov_cobertura.core._util import is_positive
from lcov_cobertura.core.config import COBERTURA_DTD, COBERTURA_VERSION, RenderOptions
from lcov_cobertura.core.rates import ZERO_RATE, format_rate

if TYPE_CHECKING:
    from lcov_cobertura.core.model import ClassCoverage, CoverageModel, LineRecord, MethodRecord

XML_HEADER = f"<?xml version=\"1.0\" ?>\n<!DOCTYPE coverage\n  SYSTEM '{COBERTURA_DTD}'>\n"
INDENT = "  "
FULL_RATE = "1.0"
NO_COMPLEXITY = "0"


def _bool(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def condition_coverage(covered: int, total: int) -> str:
    """Format branch coverage of one line, e.g. ``'50% (1/2)'``."""
    percent = covered * 100 // total if total else 0
    return f"{percent}% ({covered}/{total})"


def _method_element(parent: ET.Element, name: str, method: MethodRecord) -> None:
    rate = FULL_RATE if is_positive(method.hits) else ZERO_RATE
    elem = ET.SubElement(
        parent,
        "method",
        {"name": name, "signature": "", "line-rate": rate, "branch-rate": rate},
    )
    lines = ET.SubElement(elem, "lines")
    ET.SubElement(lines, "line", {"hits": method.hits, "number": method.line, "branch": "false"})


def _line_element(parent: ET.Element, number: int, line: LineRecord) -> None:
    attrs = {"branch": _bool(line.branch), "hits": str(line.hits), "number": str(number)}
    if line.branch:
        attrs["condition-coverage"] = condition_coverage(line.branches_covered, line.branches_total)
    ET.SubElement(parent, "line", attrs)


def _class_element(parent: ET.Element, filename: str, cls: ClassCoverage) -> None:
    elem = ET.SubElement(
        parent,
        "class",
        {
            "branch-rate": format_rate(cls.branches_total, cls.branches_covered),
            "line-rate": format_rate(cls.lines_total, cls.lines_covered),
            "complexity": NO_COMPLEXITY,
            "filename": filename,
            "name": cls.name,
        },
    )
    methods = ET.SubElement(elem, "methods")
    for name, method in cls.methods.items():
        _method_element(methods, name, method)

    lines = ET.SubElement(elem, "lines")
    for number in sorted(cls.lines):
        _line_element(lines, number, cls.lines[number])


def build_tree(model: CoverageModel, options: RenderOptions | None = None) -> ET.Element:
    """Build the ``<coverage>`` element tree for *model*."""
    options = options or RenderOptions()
    summary = model.summary
    root = ET.Element(
        "coverage",
        {
            "branch-rate": format_rate(summary.branches_total, summary.branches_covered),
            "branches-covered": str(summary.branches_covered),
            "branches-valid": str(summary.branches_total),
            "complexity": NO_COMPLEXITY,
            "line-rate": format_rate(summary.lines_total, summary.lines_covered),
            "lines-covered": str(summary.lines_covered),
            "lines-valid": str(summary.lines_total),
            "timestamp": model.timestamp,
            "version": COBERTURA_VERSION,
        },
    )
    sources = ET.SubElement(root, "sources")
    ET.SubElement(sources, "source").text = options.base_dir

    packages = ET.SubElement(root, "packages")
    for name, pkg in model.packages.items():
        elem = ET.SubElement(
            packages,
            "package",
            {
                "line-rate": pkg.line_rate,
                "branch-rate": pkg.branch_rate,
                "name": name,
                "complexity": NO_COMPLEXITY,
            },
        )
        classes = ET.SubElement(elem, "classes")
        for filename, cls in pkg.classes.items():
            _class_element(classes, filename, cls)
    return root


def generate_cobertura_xml(model: CoverageModel, options: RenderOptions | None = None) -> str:
    """Return the Cobertura XML document for *model*, including the DTD header."""
    root = build_tree(model, options)
    ET.indent(root, space=INDENT)
    return XML_HEADER + ET.tostring(root, encoding="unicode")


__all__ = ["XML_HEADER", "build_tree", "condition_coverage", "generate_cobertura_xml"]
