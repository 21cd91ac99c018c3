# src/token_check/entropy.py
import math
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from .detector import AlphabetDescriptor, TokenFormat

# 128 raw bits minus the fixed version/variant nibble bits, rounded down.
# A display approximation, not an exact count.
UUID_V4_BITS = 122.0


@dataclass(frozen=True)
class EntropyResult:
    theoretical_bits: float
    empirical_bits: float


def shannon_entropy(value: str) -> float:
    """Compute Shannon entropy for the string, in bits per symbol."""
    if not value:
        return 0.0
    freq = Counter(value)
    length = len(value)
    return sum(-(count / length) * math.log2(count / length) for count in freq.values())


def empirical_bits(value: str) -> float:
    """Total empirical bits: per-symbol Shannon entropy times length."""
    return shannon_entropy(value) * len(value)


def theoretical_bits(alphabet: AlphabetDescriptor, length: int) -> Optional[float]:
    """
    Bits of the brute-force space for a token of `length` drawn from `alphabet`.
    Returns None when the space cannot be evaluated (empty alphabet or token).
    """
    if alphabet.format == TokenFormat.UUID_V4:
        return UUID_V4_BITS
    if alphabet.size == 0 or length == 0:
        return None
    return length * math.log2(alphabet.size)


def estimate_entropy(token: str, alphabet: AlphabetDescriptor) -> Optional[EntropyResult]:
    bits = theoretical_bits(alphabet, len(token))
    if bits is None:
        return None
    return EntropyResult(theoretical_bits=bits, empirical_bits=empirical_bits(token))
