from __future__ import annotations

import re

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_int(token: str | None) -> int | None:
    """Parse the leading integer of *token* (``"12abc"`` -> 12), or ``None``."""
    if not token:
        return None
    m = _LEADING_INT_RE.match(token)
    if not m:
        return None
    return int(m.group(1))


def is_positive(token: str | None) -> bool:
    value = parse_int(token)
    return value is not None and value > 0


__all__ = ["is_positive", "parse_int"]
