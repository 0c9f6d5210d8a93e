from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import logging

import pytest
from click.testing import CliRunner

from lcov_cobertura import __version__, logger
from lcov_cobertura.cli import EXIT_DATAERR, EXIT_IOERR, EXIT_NOINPUT, EXIT_OK, EXIT_USAGE, cli
from lcov_cobertura.cli.root import split_excludes
from tests.conftest import TWO_PACKAGES_LCOV, parse_report

# --------------------------------------------------------------------------- #
# helpers                                                                     #
# --------------------------------------------------------------------------- #


def _run(runner: CliRunner, args: list[str], stdin: str | None = None) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(cli, args, input=stdin)
    return result.exit_code, result.output


@pytest.fixture
def restore_log_level() -> Iterator[None]:
    level = logger.level
    yield
    logger.setLevel(level)


# --------------------------------------------------------------------------- #
# tests                                                                       #
# --------------------------------------------------------------------------- #


def test_cli_prints_report(cli_runner: CliRunner, tracefile: Callable[..., Path]) -> None:
    code, out = _run(cli_runner, [str(tracefile())])
    assert code == EXIT_OK
    assert out.startswith('<?xml version="1.0" ?>\n<!DOCTYPE coverage')
    root = parse_report(out.rstrip("\n"))
    assert root.find(".//package").get("name") == "foo"


def test_cli_writes_output_file(
    tmp_path: Path,
    cli_runner: CliRunner,
    tracefile: Callable[..., Path],
) -> None:
    out_file = tmp_path / "reports" / "coverage.xml"
    code, out = _run(cli_runner, [str(tracefile()), "--output", str(out_file)])
    assert code == EXIT_OK
    assert out == ""
    root = parse_report(out_file.read_text(encoding="utf-8"))
    assert root.get("lines-valid") == "2"


def test_cli_base_dir(cli_runner: CliRunner, tracefile: Callable[..., Path]) -> None:
    code, out = _run(cli_runner, [str(tracefile()), "-b", "src"])
    assert code == EXIT_OK
    root = parse_report(out.rstrip("\n"))
    assert root.find("./sources/source").text == "src"
    assert root.find(".//package").get("name") == "src.foo"
    assert root.find(".//class").get("filename") == "src/foo/file.ext"


@pytest.mark.parametrize(
    "args",
    [
        ["--excludes", "foo"],
        ["-e", "foo,nomatch"],
        ["-e", "nomatch", "-e", "^f"],
    ],
)
def test_cli_excludes(cli_runner: CliRunner, tracefile: Callable[..., Path], args: list[str]) -> None:
    code, out = _run(cli_runner, [str(tracefile(TWO_PACKAGES_LCOV)), *args])
    assert code == EXIT_OK
    root = parse_report(out.rstrip("\n"))
    assert [p.get("name") for p in root.findall(".//package")] == ["bar"]
    assert root.get("lines-valid") == "4"


def test_cli_reads_stdin(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["-"], stdin=TWO_PACKAGES_LCOV)
    assert code == EXIT_OK
    assert [p.get("name") for p in parse_report(out.rstrip("\n")).findall(".//package")] == ["foo", "bar"]


def test_cli_missing_input(tmp_path: Path, cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, [str(tmp_path / "missing.info")])
    assert code == EXIT_NOINPUT
    assert "ERROR:" in out
    assert "missing.info" in out


def test_cli_invalid_exclude_pattern(cli_runner: CliRunner, tracefile: Callable[..., Path]) -> None:
    code, out = _run(cli_runner, [str(tracefile()), "--excludes", "foo("])
    assert code == EXIT_USAGE
    assert "invalid exclude pattern 'foo('" in out


def test_cli_unwritable_output(
    tmp_path: Path,
    cli_runner: CliRunner,
    tracefile: Callable[..., Path],
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    code, out = _run(cli_runner, [str(tracefile()), "-o", str(blocker / "coverage.xml")])
    assert code == EXIT_IOERR
    assert "ERROR: cannot write" in out


def test_cli_requires_input(cli_runner: CliRunner) -> None:
    code, _out = _run(cli_runner, [])
    assert code == 2


def test_cli_version_flag(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == EXIT_OK
    assert out.strip() == f"lcov-cobertura {__version__}"


def test_cli_help_lists_options(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--help"])
    assert code == EXIT_OK
    for flag in ("--base-dir", "--excludes", "--output"):
        assert flag in out


def test_split_excludes() -> None:
    assert split_excludes(None) == ()
    assert split_excludes(["a,b", "c", ""]) == ("a", "b", "c")


def test_cli_rejects_undecodable_tracefile(
    tmp_path: Path,
    cli_runner: CliRunner,
) -> None:
    tracefile = tmp_path / "latin1.info"
    tracefile.write_bytes(b"SF:foo/\xff.c\nDA:1,1\nend_of_record\n")
    code, out = _run(cli_runner, [str(tracefile)])
    assert code == EXIT_DATAERR
    assert "ERROR: cannot decode" in out
    assert "latin1.info" in out


@pytest.mark.usefixtures("restore_log_level")
def test_cli_verbose_logs_parser_details(
    cli_runner: CliRunner,
    tracefile: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.DEBUG, logger="lcov_cobertura"):
        code, _out = _run(cli_runner, [str(tracefile(TWO_PACKAGES_LCOV)), "-v", "-e", "foo"])
        assert logger.level == logging.DEBUG
    assert code == EXIT_OK
    assert "excluding package 'foo'" in caplog.messages
    assert all(r.levelno == logging.DEBUG for r in caplog.records if r.message.startswith("excluding"))


@pytest.mark.usefixtures("restore_log_level")
def test_cli_quiet_logs_errors_only(cli_runner: CliRunner, tracefile: Callable[..., Path]) -> None:
    code, _out = _run(cli_runner, [str(tracefile()), "-q"])
    assert code == EXIT_OK
    assert logger.level == logging.ERROR


@pytest.mark.usefixtures("restore_log_level")
def test_cli_default_log_level(
    cli_runner: CliRunner,
    tracefile: Callable[..., Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    code, _out = _run(cli_runner, [str(tracefile(TWO_PACKAGES_LCOV)), "-e", "foo"])
    assert code == EXIT_OK
    assert logger.level == logging.WARNING
    assert "excluding package 'foo'" not in caplog.messages
