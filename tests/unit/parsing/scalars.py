"""Unit tests for the strict scalar and list parsers."""

from __future__ import annotations

import math

import pytest

from envfallback import EnvParseError
from envfallback.helpers import parse_bool, parse_int, parse_float, parse_bytes, parse_strings


def test_parse_bool_rejects_unknown_literal() -> None:
    with pytest.raises(EnvParseError) as exc_info:
        parse_bool("yes")
    assert exc_info.value.kind == "bool"
    assert exc_info.value.raw == "yes"


def test_parse_bool_rejects_empty() -> None:
    with pytest.raises(EnvParseError):
        parse_bool("")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0", 0), ("+5", 5), ("-42", -42), ("007", 7), ("9223372036854775807", (1 << 63) - 1)],
)
def test_parse_int_accepts_base10(raw: str, expected: int) -> None:
    assert parse_int(raw) == expected


def test_parse_int_accepts_most_negative_word() -> None:
    assert parse_int("-9223372036854775808") == -(1 << 63)


@pytest.mark.parametrize("raw", ["", "abc", "1.0", " 1", "1 ", "1_000", "0x10", "+", "١٢"])
def test_parse_int_rejects_non_decimal(raw: str) -> None:
    with pytest.raises(EnvParseError, match="not a base-10 integer"):
        parse_int(raw)


def test_parse_int_rejects_overflow() -> None:
    with pytest.raises(EnvParseError, match="out of 64-bit range"):
        parse_int("9223372036854775808")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1.23", 1.23), ("-0.5", -0.5), ("1.", 1.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-1", 0.25)],
)
def test_parse_float_accepts_literals(raw: str, expected: float) -> None:
    assert parse_float(raw) == pytest.approx(expected)


def test_parse_float_accepts_special_values() -> None:
    assert parse_float("Inf") == math.inf
    assert parse_float("-infinity") == -math.inf
    assert math.isnan(parse_float("NaN"))


@pytest.mark.parametrize("raw", ["", ".", "1.2.3", " 1.0", "1_0.0", "e5", "1e", "abc"])
def test_parse_float_rejects_malformed(raw: str) -> None:
    with pytest.raises(EnvParseError, match="not a decimal number"):
        parse_float(raw)


def test_parse_float_rejects_overflow() -> None:
    with pytest.raises(EnvParseError, match="out of range"):
        parse_float("1e400")


def test_parse_float_underflow_is_zero() -> None:
    assert parse_float("1e-400") == 0.0


def test_parse_bytes_encodes_utf8() -> None:
    assert parse_bytes("héllo") == "héllo".encode()


def test_parse_bytes_restores_surrogate_escapes() -> None:
    assert parse_bytes("\udcff") == b"\xff"


def test_parse_strings_keeps_empty_fields() -> None:
    assert parse_strings("a,,b,") == ["a", "", "b", ""]


def test_parse_strings_multichar_separator() -> None:
    assert parse_strings("a::b::c", "::") == ["a", "b", "c"]


def test_parse_strings_empty_separator_splits_characters() -> None:
    assert parse_strings("abc", "") == ["a", "b", "c"]


def test_parse_error_message_omits_raw_value() -> None:
    with pytest.raises(EnvParseError) as exc_info:
        parse_int("s3cr3t")
    assert "s3cr3t" not in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)


def test_parse_int_leading_zeros_do_not_count_toward_width() -> None:
    assert parse_int("0" * 5000 + "1") == 1
    assert parse_int("-" + "0" * 5000 + "42") == -42


@pytest.mark.parametrize("raw", ["9" * 5000, "1" + "0" * 19, "-" + "9" * 20])
def test_parse_int_rejects_long_digit_strings(raw: str) -> None:
    with pytest.raises(EnvParseError, match="out of 64-bit range"):
        parse_int(raw)


@pytest.mark.parametrize("raw", ["-nan", "+NaN", "-NAN"])
def test_parse_float_rejects_signed_nan(raw: str) -> None:
    with pytest.raises(EnvParseError, match="not a decimal number"):
        parse_float(raw)


def test_parse_float_accepts_signed_infinity() -> None:
    assert parse_float("+inf") == math.inf
    assert parse_float("-Inf") == -math.inf


def test_parse_bytes_mixed_surrogates_keep_escaped_bytes() -> None:
    assert parse_bytes("a\udcff\ud800") == b"a\xff" + "\ud800".encode("utf-8", "surrogatepass")
