import sys
from pathlib import Path

from lcov_cobertura.errors import TracefileNotFoundError

STDIO = Path("-")


def read_input(source: Path) -> str:
    """Read an LCOV tracefile (PATH, or '-' for stdin)."""
    if source == STDIO:
        return sys.stdin.read()
    if not source.is_file():
        msg = f"tracefile not found: {source}"
        raise TracefileNotFoundError(msg)
    return source.read_text(encoding="utf-8")


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == STDIO:
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
