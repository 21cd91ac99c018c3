# src/token_check/detector.py
"""
Format and alphabet detection.

Formats are tried in a fixed order and the first match wins, so an all-hex
token is always Hex even though it would also pass as Base64-ish or Generic.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from .patterns import BASE64_ISH, CHARACTER_CLASSES, HEX, UUID_V4


class TokenFormat(str, Enum):
    UUID_V4 = "UUIDv4"
    HEX = "Hex"
    BASE64_ISH = "Base64-ish"
    GENERIC = "Generic"


@dataclass(frozen=True)
class AlphabetDescriptor:
    format: TokenFormat
    label: str
    size: int
    fixed_note: bool = False


# Order matters: UUIDv4 before Hex before Base64-ish; Generic is the fallback
CLASSIFIERS: List[Tuple[TokenFormat, Callable[[str], bool]]] = [
    (TokenFormat.UUID_V4, lambda token: UUID_V4.fullmatch(token) is not None),
    (TokenFormat.HEX, lambda token: HEX.fullmatch(token) is not None),
    (TokenFormat.BASE64_ISH, lambda token: BASE64_ISH.fullmatch(token) is not None),
]

FIXED_ALPHABETS = {
    TokenFormat.UUID_V4: AlphabetDescriptor(TokenFormat.UUID_V4, "UUIDv4 (hex+hyphen)", 16, True),
    TokenFormat.HEX: AlphabetDescriptor(TokenFormat.HEX, "Hex (0-9,a-f)", 16),
    # '=' padding is not counted as an alphabet member
    TokenFormat.BASE64_ISH: AlphabetDescriptor(TokenFormat.BASE64_ISH, "Base64-ish (A-Za-z0-9+/)", 64, True),
}


def detect_format(token: str) -> TokenFormat:
    """Return the first matching structured format, else Generic."""
    for fmt, matches in CLASSIFIERS:
        if matches(token):
            return fmt
    return TokenFormat.GENERIC


def generic_alphabet(token: str) -> AlphabetDescriptor:
    size = 0
    label_parts = []
    for label, pattern, contribution in CHARACTER_CLASSES:
        if pattern.search(token):
            size += contribution
            label_parts.append(label)

    if size == 0:
        return AlphabetDescriptor(TokenFormat.GENERIC, "N/A", 0)
    return AlphabetDescriptor(TokenFormat.GENERIC, " + ".join(label_parts), size)


def detect_alphabet(token: str) -> AlphabetDescriptor:
    fmt = detect_format(token)
    if fmt in FIXED_ALPHABETS:
        return FIXED_ALPHABETS[fmt]
    return generic_alphabet(token)
