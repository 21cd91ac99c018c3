import math

from token_check.numfmt import format_big_int_approx, format_duration, format_float_approx


def test_small_integers_are_shown_verbatim():
    assert format_big_int_approx(0) == "0"
    assert format_big_int_approx(65536) == "65536"
    assert format_big_int_approx(999999) == "999999"


def test_large_integers_are_abbreviated():
    assert format_big_int_approx(1000000) == "100… ×10^6"
    assert format_big_int_approx(4294967296) == "429… ×10^9"
    assert format_big_int_approx(2 ** 168) == "374… ×10^50"


def test_float_fallback():
    assert format_float_approx(math.inf) == "∞"
    assert format_float_approx(math.nan) == "∞"
    assert format_float_approx(0.0) == "0"
    assert format_float_approx(1234.5) == "1.23 ×10^3"
    assert format_float_approx(4294967296.0) == "4.29 ×10^9"


def test_sub_second_durations():
    assert format_duration(5e-7) == "500.00 ns"
    assert format_duration(0.0) == "0.00 ns"
    assert format_duration(5e-4) == "500.00 µs"
    assert format_duration(0.5) == "500.00 ms"


def test_non_finite_duration():
    assert format_duration(math.inf) == "∞"
    assert format_duration(math.nan) == "∞"


def test_duration_uses_at_most_two_units():
    assert format_duration(1) == "1 sec"
    assert format_duration(59.9) == "59 secs"
    assert format_duration(61) == "1 min 1 sec"
    assert format_duration(2 * 3600 + 5) == "2 hours 5 secs"
    assert format_duration(365 * 24 * 3600 + 5) == "1 year 5 secs"
    assert format_duration(2 * 365 * 24 * 3600 + 3 * 86400 + 4 * 3600) == "2 years 3 days"


def test_huge_durations_stay_exact_in_years():
    text = format_duration(2.0 ** 127 / 1e9)
    assert text.split()[1] == "years"
    assert len(text.split()) <= 4
