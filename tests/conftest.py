from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner
from defusedxml import ElementTree

from lcov_cobertura.core.serializer import XML_HEADER

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element  # noqa: S405

BASIC_LCOV = "SF:foo/file.ext\nDA:1,1\nDA:2,0\nBRDA:1,1,1,1\nBRDA:1,1,2,0\nend_of_record\n"

FUNCTIONS_LCOV = (
    "TN:\nSF:foo/file.ext\nDA:1,1\nDA:2,0\nFN:1,(anonymous_1)\nFN:2,namedFn\nFNDA:1,(anonymous_1)\nend_of_record\n"
)

TWO_PACKAGES_LCOV = (
    "SF:foo/file.ext\nDA:1,1\nDA:2,0\nend_of_record\nSF:bar/file.ext\nDA:1,1\nDA:2,1\nend_of_record\n"
)


def parse_report(xml: str) -> Element:
    """Parse a generated report, skipping the DOCTYPE header."""
    assert xml.startswith(XML_HEADER)
    return ElementTree.fromstring(xml.removeprefix(XML_HEADER))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def tracefile(tmp_path: Path) -> Callable[..., Path]:
    def write(content: str = BASIC_LCOV, *, filename: str = "lcov.info") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return write
