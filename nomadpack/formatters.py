"""Text formatting helpers for command output."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Sequence

_DELIM = "|"
_GLUE = "  "
_EMPTY = "<none>"

_ZERO_AWARE = datetime(1, 1, 1, tzinfo=timezone.utc)
_ZERO_NAIVE = datetime(1, 1, 1)


def _cells(line: str) -> list[str]:
    return [cell.strip() or _EMPTY for cell in line.split(_DELIM)]


def format_list(lines: Sequence[str]) -> str:
    """Align '|'-separated fields into columns, filling blanks with '<none>'."""
    rows = [_cells(line) for line in lines]
    widths: list[int] = []
    for row in rows:
        for position, cell in enumerate(row):
            if position == len(widths):
                widths.append(len(cell))
            else:
                widths[position] = max(widths[position], len(cell))
    rendered = []
    for row in rows:
        padded = "".join(cell.ljust(width) + _GLUE for cell, width in zip(row[:-1], widths))
        rendered.append(padded + row[-1])
    return "\n".join(rendered)


def _as_aware(moment: datetime) -> datetime:
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


def format_time(moment: datetime) -> str:
    """Format as ISO 8601 with a 'Z' or '+hh:mm' offset; empty at or before the epoch."""
    moment = _as_aware(moment)
    if moment.timestamp() < 1:
        return ""
    stamp = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    offset = moment.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds()) // 60
    if minutes == 0:
        return stamp + "Z"
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{stamp}{sign}{hours:02d}:{mins:02d}"


def _truncate(moment: datetime, unit: timedelta) -> datetime:
    if unit <= timedelta(0):
        return moment
    base = _ZERO_NAIVE if moment.tzinfo is None else _ZERO_AWARE
    return moment - (moment - base) % unit


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    if rest == 0:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def _duration_text(delta: timedelta) -> str:
    nanos = (delta.days * 86400 + delta.seconds) * 10**9 + delta.microseconds * 1000
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_fraction(nanos, 1000)}µs"
    if nanos < 10**9:
        return f"{sign}{_fraction(nanos, 1_000_000)}ms"
    seconds, rest = divmod(nanos, 10**9)
    text = _fraction((seconds % 60) * 10**9 + rest, 10**9) + "s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def format_time_difference(first: datetime, second: datetime, unit: timedelta) -> str:
    """Difference between two times, each truncated to ``unit``, as e.g. '6s' or '1h0m0s'."""
    return _duration_text(_truncate(second, unit) - _truncate(first, unit))


def format_sha1_reference(ref: str) -> str:
    """Shorten a SHA1 hex reference to 8 characters; leave other refs unchanged."""
    if len(ref) != 40 and ref.lower().strip("0123456789abcdef"):
        return ref
    return ref[:8]