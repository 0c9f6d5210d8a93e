"""File-level conversion wrapping the pure parse/render core."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lcov_cobertura._meta import logger
from lcov_cobertura.core.config import ConvertOptions, ParseOptions
from lcov_cobertura.core.parser import parse_lcov
from lcov_cobertura.core.serializer import generate_cobertura_xml
from lcov_cobertura.errors import InvalidExcludePatternError, TracefileNotFoundError
from lcov_cobertura.io import read_input

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class PipelineError(Exception):
    """Base class for errors emitted by the pipeline."""


class NoInputError(PipelineError):
    """LCOV tracefile was missing."""


class ConfigError(PipelineError):
    """Conversion options are invalid (e.g. a broken exclude pattern)."""


class SystemIOError(PipelineError):
    """Filesystem IO error while reading the tracefile."""


class DataError(PipelineError):
    """Tracefile contents could not be decoded."""


def compile_excludes(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile exclusion patterns, naming the first one that is invalid."""
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise InvalidExcludePatternError(pattern, str(exc)) from exc
    return compiled


def convert_text(text: str, options: ConvertOptions) -> str:
    """Convert tracefile *text* to Cobertura XML."""
    try:
        excludes = compile_excludes(options.excludes)
    except InvalidExcludePatternError as exc:
        raise ConfigError(str(exc)) from exc
    model = parse_lcov(text, ParseOptions(base_dir=options.base_dir, excludes=tuple(excludes)))
    return generate_cobertura_xml(model, options.render)


def convert(path: Path, options: ConvertOptions) -> str:
    """Read the tracefile at *path* and return its Cobertura XML rendering."""
    try:
        text = read_input(path)
    except TracefileNotFoundError as exc:
        raise NoInputError(str(exc)) from exc
    except OSError as exc:
        msg = f"cannot read {path}: {exc.strerror or exc}"
        raise SystemIOError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"cannot decode {path} as UTF-8: {exc.reason} at byte {exc.start}"
        raise DataError(msg) from exc
    logger.info("converting %s (base dir %s)", path, options.base_dir)
    return convert_text(text, options)


__all__ = [
    "ConfigError",
    "DataError",
    "NoInputError",
    "PipelineError",
    "SystemIOError",
    "compile_excludes",
    "convert",
    "convert_text",
]
