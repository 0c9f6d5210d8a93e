from lcov_cobertura.cli.exit_codes import (
    EXIT_DATAERR,
    EXIT_IOERR,
    EXIT_NOINPUT,
    EXIT_OK,
    EXIT_USAGE,
)
from lcov_cobertura.cli.root import cli, create_app, main

__all__ = [
    "EXIT_DATAERR",
    "EXIT_IOERR",
    "EXIT_NOINPUT",
    "EXIT_OK",
    "EXIT_USAGE",
    "cli",
    "create_app",
    "main",
]
