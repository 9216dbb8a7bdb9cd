"""Tests for :mod:`envdecouple.convert`."""

from __future__ import annotations

import pytest

from envdecouple import convert


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", 0),
        ("-0", 0),
        ("+12", 12),
        ("0X_FF", 255),
        ("0B1_0", 2),
        ("0_7", 7),
        ("-9223372036854775808", convert.INT_MIN),
        ("9223372036854775807", convert.INT_MAX),
    ],
)
def test_parse_int_accepts_literal_forms(raw, expected):
    assert convert.parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["08", "1__0", "_1", "1_", "0b2", "--1", "-9223372036854775809", "42\n"])
def test_parse_int_rejects_malformed_literals(raw):
    assert convert.parse_int(raw) is None


def test_parse_bool_is_case_insensitive():
    assert convert.parse_bool("TrUe") is True
    assert convert.parse_bool("F") is False
    assert convert.parse_bool("on") is None


def test_parse_csv_row_returns_first_record_only():
    assert convert.parse_csv_row("a,b\nc,d") == ["a", "b"]


def test_parse_csv_row_skips_leading_blank_lines():
    assert convert.parse_csv_row("\n\nx,y") == ["x", "y"]


def test_parse_csv_row_keeps_empty_fields():
    assert convert.parse_csv_row("a,,b,") == ["a", "", "b", ""]


def test_parse_csv_row_allows_newline_inside_quotes():
    assert convert.parse_csv_row('"line one\nline two",b') == ["line one\nline two", "b"]


@pytest.mark.parametrize(
    "raw",
    ["", "\n\n", 'one,"', '"a"b,c', '"unterminated', 'a"b,c', 'a, "b"', 'a,b"'],
)
def test_parse_csv_row_rejects_empty_or_malformed_input(raw):
    assert convert.parse_csv_row(raw) is None


@pytest.mark.parametrize(
    "value, expected",
    [(5, 5), (-1, 0), (11, 10), (0, 0), (10, 10)],
)
def test_clamp_bounds_value(value, expected):
    assert convert.clamp(value, 0, 10) == expected


def test_clamp_prefers_lower_bound_when_inverted():
    assert convert.clamp(5, 10, 0) == 10


def test_parse_csv_row_has_no_field_size_limit():
    big = "x" * 200_000

    assert convert.parse_csv_row(f"{big},y") == [big, "y"]
    assert convert.parse_csv_row(f'"{big}",y') == [big, "y"]


def test_parse_csv_row_normalises_crlf():
    assert convert.parse_csv_row('"a\r\nb",c\r\nd,e') == ["a\nb", "c"]
    assert convert.parse_csv_row("a,b\r") == ["a", "b"]


def test_parse_csv_row_keeps_spaces_around_unquoted_fields():
    assert convert.parse_csv_row(" a , b ") == [" a ", " b "]
