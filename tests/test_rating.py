import pytest

from token_check.rating import (
    RATING_ORDER,
    RatingLevel,
    Thresholds,
    bar_percent,
    parse_thresholds,
    rate,
    rate_bits,
)


@pytest.mark.parametrize("raw,expected", [
    ("50,70,90", Thresholds(50, 70, 90)),
    (" 50 , 70 , 90 ", Thresholds(50, 70, 90)),
    ("", Thresholds()),
    (None, Thresholds()),
    ("30", Thresholds(30, 80, 100)),
    ("abc,70", Thresholds(64, 70, 100)),
    ("nan,70,90", Thresholds(64, 70, 90)),
    ("50,,90", Thresholds(50, 80, 90)),
    ("1,2,3,4", Thresholds(1, 2, 3)),
    ([10, 20], Thresholds(10, 20, 100)),
])
def test_parse_thresholds(raw, expected):
    assert parse_thresholds(raw) == expected


def test_parse_thresholds_passes_parsed_values_through():
    t = Thresholds(1, 2, 3)
    assert parse_thresholds(t) is t


def test_default_boundaries():
    t = Thresholds()
    assert rate_bits(63.99, t) == RatingLevel.WEAK
    assert rate_bits(64, t) == RatingLevel.MODERATE
    assert rate_bits(99.99, t) == RatingLevel.MODERATE
    assert rate_bits(100, t) == RatingLevel.STRONG


def test_ok_threshold_is_not_a_boundary():
    t = Thresholds(weak=50, ok=55, strong=90)
    assert rate_bits(60, t) == RatingLevel.MODERATE
    assert rate_bits(89, t) == RatingLevel.MODERATE


def test_rating_holds_for_any_ordered_thresholds():
    for weak in range(0, 130, 13):
        for strong in range(weak, 140, 17):
            t = Thresholds(weak=weak, ok=(weak + strong) / 2, strong=strong)
            for bits in range(0, 160, 3):
                level = rate_bits(bits, t)
                if bits < weak:
                    assert level == RatingLevel.WEAK
                elif bits >= strong:
                    assert level == RatingLevel.STRONG
                else:
                    assert level == RatingLevel.MODERATE


def test_bar_percent():
    t = Thresholds()
    assert bar_percent(0, t) == 0.0
    assert bar_percent(70, t) == 50.0
    assert bar_percent(140, t) == 100.0
    assert bar_percent(500, t) == 100.0
    assert bar_percent(-5, t) == 0.0


def test_bar_percent_with_non_positive_ceiling():
    t = Thresholds(weak=-100, ok=-60, strong=-40)
    assert bar_percent(10, t) == 100.0
    assert bar_percent(0, t) == 0.0


def test_rate_combines_level_and_bar():
    r = rate(60, parse_thresholds("50,70,90"))
    assert r.level == RatingLevel.MODERATE
    assert r.percent == pytest.approx(60 / 130 * 100)


def test_rating_order():
    assert [level.value for level in RATING_ORDER] == ["Weak", "Moderate", "Strong"]
    assert RatingLevel.WEAK.rank < RatingLevel.MODERATE.rank < RatingLevel.STRONG.rank
