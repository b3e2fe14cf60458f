from __future__ import annotations

import re

from .sentinel import SENTINEL

_WS_RE = re.compile(r"\s+")


def split_line(text: str, field_count: int) -> list[str]:
    """Split one input line into positional values, right-padded with ''."""
    values = text.split() if text.strip() else []
    while len(values) < field_count:
        values.append("")
    return values


def sanitize_value(raw: str) -> str:
    # a single field can't contain spaces, they would shift every later field
    return _WS_RE.sub("-", raw).lower()


def _last_non_empty(values: list[str]) -> int:
    i = len(values) - 1
    while i >= 0 and values[i] == "":
        i -= 1
    return i


def edit_field(values: list[str], idx: int, new_value: str) -> str:
    """Set field ``idx`` and return the re-joined input line.

    Editing past the last filled field fills the gap with '_' so the
    later value keeps its position once the line is split again.
    """
    out = list(values)
    while len(out) <= idx:
        out.append("")

    last = _last_non_empty(out)
    if idx > last:
        for i in range(last + 1, idx):
            out[i] = SENTINEL
    out[idx] = sanitize_value(new_value)

    return " ".join(out[: _last_non_empty(out) + 1])


def suggest(candidates: tuple[str, ...] | list[str], prefix: str) -> str | None:
    if not prefix:
        return None
    p = prefix.lower()
    for c in candidates:
        if c.lower().startswith(p):
            return c
    return None
