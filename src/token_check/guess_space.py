# src/token_check/guess_space.py
"""
Guess-space size and brute-force time estimation.

The guess space is |alphabet| ** length. It is computed exactly with Python
integers unless the caller asks for the floating approximation, and it is
reported as a qualitative label when exact computation is pointless
(alphabet of size <= 1, tokens longer than MAX_EXACT_LENGTH, UUIDv4).
"""
import math
from dataclasses import dataclass
from typing import Optional, Union

from .detector import AlphabetDescriptor, TokenFormat
from .numfmt import format_big_int_approx, format_duration, format_float_approx

MAX_EXACT_LENGTH = 2048
DEFAULT_RATE = 1e9

UUID_V4_SPACE_LABEL = "≈ 2^122"
VERY_LARGE_LABEL = "very large"

EXACT = "exact"
APPROXIMATE = "approximate"
QUALITATIVE = "qualitative"


@dataclass(frozen=True)
class GuessSpace:
    kind: str
    display: str
    value: Optional[Union[int, float]] = None

    @classmethod
    def exact(cls, value: int) -> "GuessSpace":
        return cls(EXACT, format_big_int_approx(value), value)

    @classmethod
    def approximate(cls, value: float) -> "GuessSpace":
        return cls(APPROXIMATE, format_float_approx(value), value)

    @classmethod
    def qualitative(cls, label: str) -> "GuessSpace":
        return cls(QUALITATIVE, label)

    @property
    def is_exact(self) -> bool:
        return self.kind == EXACT


@dataclass(frozen=True)
class CrackTimeEstimate:
    seconds: float
    display: str
    rate: float


def pow_big(base, exp) -> int:
    """Square-and-multiply over arbitrary-precision integers."""
    b = max(0, math.floor(base))
    e = max(0, math.floor(exp))
    if b == 0:
        return 0
    result = 1
    while e > 0:
        if e & 1:
            result *= b
        b *= b
        e >>= 1
    return result


def pow_float(base: float, exp: float) -> float:
    try:
        return math.pow(base, exp)
    except OverflowError:
        return math.inf


def estimate_guess_space(alphabet: AlphabetDescriptor, length: int, exact: bool = True) -> GuessSpace:
    if alphabet.format == TokenFormat.UUID_V4:
        return GuessSpace.qualitative(UUID_V4_SPACE_LABEL)
    if alphabet.size <= 1 or length > MAX_EXACT_LENGTH:
        return GuessSpace.qualitative(VERY_LARGE_LABEL)
    if not exact:
        return GuessSpace.approximate(pow_float(alphabet.size, length))
    return GuessSpace.exact(pow_big(alphabet.size, length))


def parse_rate(value) -> float:
    """Accept '1e9', '1000000', '2.5e12' or a number; anything else -> DEFAULT_RATE."""
    if isinstance(value, bool):
        return DEFAULT_RATE
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return DEFAULT_RATE
    if not math.isfinite(rate) or rate <= 0:
        return DEFAULT_RATE
    return rate


def crack_seconds(bits: float, rate: float) -> float:
    """Median time to hit the token: half of 2**bits guesses at `rate` per second."""
    return pow_float(2.0, bits) / 2 / rate


def estimate_crack_time(bits: float, rate: float) -> CrackTimeEstimate:
    seconds = crack_seconds(bits, rate)
    return CrackTimeEstimate(seconds=seconds, display=format_duration(seconds), rate=rate)
