from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from typer.main import get_command

from lcov_cobertura import __version__, logger
from lcov_cobertura.cli.exit_codes import EXIT_DATAERR, EXIT_IOERR, EXIT_NOINPUT, EXIT_USAGE
from lcov_cobertura.core.config import DEFAULT_BASE_DIR, LOG_FORMAT, ConvertOptions
from lcov_cobertura.core.pipeline import (
    ConfigError,
    DataError,
    NoInputError,
    SystemIOError,
    convert,
)
from lcov_cobertura.io import write_output

PROG = "lcov-cobertura"


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"{PROG} {__version__}")
        raise typer.Exit


def _configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def split_excludes(values: list[str] | None) -> tuple[str, ...]:
    """Flatten repeated, comma separated ``--excludes`` values."""
    return tuple(part for value in values or () for part in value.split(",") if part)


def _fail(exc: object, code: int) -> typer.Exit:
    typer.echo(f"ERROR: {exc}", err=True)
    return typer.Exit(code=code)


def convert_cmd(
    file: Annotated[
        Path,
        typer.Argument(help="LCOV tracefile to convert ('-' reads stdin).", show_default=False),
    ],
    base_dir: Annotated[
        str,
        typer.Option("-b", "--base-dir", help="Directory where source files are located."),
    ] = DEFAULT_BASE_DIR,
    excludes: Annotated[
        list[str] | None,
        typer.Option(
            "-e",
            "--excludes",
            help="Comma-separated regexes of packages to exclude (repeatable).",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to store the Cobertura XML file (default: stdout)."),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("-q", "--quiet", help="Only log errors."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log debug details while converting."),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Convert LCOV output to Cobertura-compatible XML."""
    _configure_runtime(quiet=quiet, verbose=verbose)
    options = ConvertOptions(base_dir=base_dir, excludes=split_excludes(excludes))

    try:
        xml = convert(file, options)
    except NoInputError as exc:
        raise _fail(exc, EXIT_NOINPUT) from exc
    except SystemIOError as exc:
        raise _fail(exc, EXIT_IOERR) from exc
    except DataError as exc:
        raise _fail(exc, EXIT_DATAERR) from exc
    except ConfigError as exc:
        raise _fail(exc, EXIT_USAGE) from exc

    try:
        write_output(xml, output)
    except OSError as exc:
        raise _fail(f"cannot write {output}: {exc.strerror or exc}", EXIT_IOERR) from exc
    if output is not None:
        logger.info("wrote %s", output)


def create_app() -> typer.Typer:
    app = typer.Typer(
        name=PROG,
        help="Converts LCOV output to Cobertura-compatible XML.",
        add_completion=False,
    )
    app.command()(convert_cmd)
    return app


def main() -> None:
    app = create_app()
    get_command(app)(prog_name=PROG)


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main", "split_excludes"]
