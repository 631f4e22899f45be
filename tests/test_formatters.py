from datetime import datetime, timedelta, timezone

import pytest

from nomadpack.formatters import (
    format_list,
    format_sha1_reference,
    format_time,
    format_time_difference,
)


@pytest.mark.parametrize(
    "lines, expected",
    [
        ([], ""),
        (["a", "b", "c"], "a\nb\nc"),
    ],
)
def test_format_list(lines, expected):
    assert format_list(lines) == expected


def test_format_list_columns_align_and_fill_blanks():
    out = format_list(["NAME|STATUS", "web|", "database|running"])
    rows = out.split("\n")
    assert len(rows) == 3
    assert "<none>" in rows[1]
    starts = {row.index(word) for row, word in zip(rows, ["STATUS", "<none>", "running"])}
    assert len(starts) == 1


def test_format_time():
    moment = datetime(2000, 1, 1, 12, 34, 56, tzinfo=timezone.utc)
    assert format_time(moment) == "2000-01-01T12:34:56Z"


def test_format_time_epoch_is_blank():
    assert format_time(datetime(1970, 1, 1, tzinfo=timezone.utc)) == ""
    assert format_time(datetime(1, 1, 1, tzinfo=timezone.utc)) == ""


def test_format_time_with_offset():
    zone = timezone(timedelta(hours=2))
    out = format_time(datetime(2000, 1, 1, 12, 34, 56, tzinfo=zone))
    assert out.endswith("+02:00")
    assert out.startswith("2000-01-01T12:34:56")


def test_format_time_difference_now():
    now = datetime.now(timezone.utc)
    first = now - timedelta(microseconds=now.microsecond)
    second = first + timedelta(seconds=6, milliseconds=22)
    assert format_time_difference(first, second, timedelta(seconds=1)) == "6s"


def test_format_time_difference_documented_example():
    base = datetime(2020, 5, 5, 10, 0, 0, tzinfo=timezone.utc)
    first = base + timedelta(minutes=1, seconds=22, milliseconds=33)
    second = base + timedelta(minutes=1, seconds=28, milliseconds=55)
    assert format_time_difference(first, second, timedelta(seconds=1)) == "6s"


def test_format_time_difference_is_antisymmetric():
    base = datetime(2020, 5, 5, 10, 0, 0, tzinfo=timezone.utc)
    later = base + timedelta(seconds=6)
    forward = format_time_difference(base, later, timedelta(seconds=1))
    backward = format_time_difference(later, base, timedelta(seconds=1))
    assert backward == "-" + forward


def test_format_time_difference_equal_times():
    moment = datetime(2020, 5, 5, 10, 0, 0, tzinfo=timezone.utc)
    assert format_time_difference(moment, moment, timedelta(seconds=1)) == "0s"


def test_format_sha1_reference_shortens_sha():
    sha = "0123456789abcdef0123456789abcdef01234567"
    assert format_sha1_reference(sha) == sha[:8]


def test_format_sha1_reference_keeps_non_sha():
    assert format_sha1_reference("latest") == "latest"
    assert format_sha1_reference("v0.0.1") == "v0.0.1"


def test_format_sha1_reference_short_hex():
    assert format_sha1_reference("abc") == "abc"