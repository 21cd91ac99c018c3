import math

import pytest

from token_check.detector import detect_alphabet
from token_check.entropy import (
    UUID_V4_BITS,
    empirical_bits,
    estimate_entropy,
    shannon_entropy,
    theoretical_bits,
)


def bits_for(token):
    return theoretical_bits(detect_alphabet(token), len(token))


def test_uuid_bits_are_fixed():
    assert bits_for("550e8400-e29b-41d4-a716-446655440000") == 122.0
    assert UUID_V4_BITS == 122.0


@pytest.mark.parametrize("n", [1, 8, 15, 32, 64])
def test_hex_bits_are_four_per_char(n):
    assert bits_for("a" * n) == n * 4.0


@pytest.mark.parametrize("token", ["QWxhZGRpbjpvcGVu", "A7kLw39mQp8Zr2Tx", "hunter2"])
def test_base64_bits_are_six_per_char(token):
    assert bits_for(token) == len(token) * 6.0


def test_generic_single_class():
    assert bits_for("!!!") == 15.0
    assert bits_for("zz") != 2 * math.log2(26)  # "zz" is Base64-ish
    assert bits_for("z") == pytest.approx(math.log2(26))


def test_unevaluable_returns_none():
    assert bits_for("日本") is None
    assert bits_for("") is None
    assert estimate_entropy("日本", detect_alphabet("日本")) is None


def test_empirical_entropy_of_repeated_char_is_zero():
    assert shannon_entropy("aaaa") == 0.0
    assert empirical_bits("aaaa") == 0.0


@pytest.mark.parametrize("token", ["ab", "abcd", "abcdefgh", "P@s w0rd!"])
def test_empirical_entropy_of_distinct_chars(token):
    n = len(token)
    assert empirical_bits(token) == pytest.approx(n * math.log2(n))


def test_empirical_entropy_of_empty_string():
    assert shannon_entropy("") == 0.0
    assert empirical_bits("") == 0.0


def test_empirical_entropy_is_independent_of_format():
    result = estimate_entropy("deadbeef", detect_alphabet("deadbeef"))
    assert result.theoretical_bits == 32.0
    # d e a d b e e f -> e:3 d:2 a:1 b:1 f:1
    expected = -sum(p * math.log2(p) for p in (3 / 8, 2 / 8, 1 / 8, 1 / 8, 1 / 8)) * 8
    assert result.empirical_bits == pytest.approx(expected)
