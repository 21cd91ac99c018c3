# src/token_check/rating.py
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_WEAK = 64.0
DEFAULT_OK = 80.0
DEFAULT_STRONG = 100.0

# Bar reaches 100% this many bits past the strong threshold
BAR_HEADROOM_BITS = 40


class RatingLevel(str, Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"

    @property
    def rank(self) -> int:
        return RATING_ORDER.index(self)


RATING_ORDER = [RatingLevel.WEAK, RatingLevel.MODERATE, RatingLevel.STRONG]


@dataclass(frozen=True)
class Thresholds:
    weak: float = DEFAULT_WEAK
    # Accepted for configuration but not consulted: Moderate ends at `strong`
    ok: float = DEFAULT_OK
    strong: float = DEFAULT_STRONG


@dataclass(frozen=True)
class Rating:
    level: RatingLevel
    percent: float


def _to_threshold(raw) -> Optional[float]:
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value):
        return None
    return value


def parse_thresholds(value) -> Thresholds:
    """
    Parse 'weak,ok,strong' (a string or a sequence) position by position.
    Missing or non-numeric entries keep their default; extras are ignored.
    """
    if isinstance(value, Thresholds):
        return value
    if value is None:
        return Thresholds()
    parts = value.split(",") if isinstance(value, str) else list(value)

    defaults = [DEFAULT_WEAK, DEFAULT_OK, DEFAULT_STRONG]
    parsed = []
    for idx, default in enumerate(defaults):
        number = _to_threshold(parts[idx]) if idx < len(parts) else None
        parsed.append(default if number is None else number)
    return Thresholds(*parsed)


def rate_bits(bits: float, thresholds: Thresholds) -> RatingLevel:
    if bits < thresholds.weak:
        return RatingLevel.WEAK
    if bits < thresholds.strong:
        return RatingLevel.MODERATE
    return RatingLevel.STRONG


def bar_percent(bits: float, thresholds: Thresholds) -> float:
    ceiling = thresholds.strong + BAR_HEADROOM_BITS
    if ceiling <= 0:
        return 100.0 if bits > 0 else 0.0
    return max(0.0, min(100.0, bits / ceiling * 100))


def rate(bits: float, thresholds: Thresholds) -> Rating:
    return Rating(level=rate_bits(bits, thresholds), percent=bar_percent(bits, thresholds))
