# src/token_check/analyzer.py
"""
One-shot token analysis.

analyze() runs detection -> entropy -> guess space -> crack time -> rating
and returns an immutable AnalysisResult. It never raises for string input:
an empty token and an alphabet of size zero come back as distinct statuses.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .detector import AlphabetDescriptor, TokenFormat, detect_alphabet
from .entropy import EntropyResult, empirical_bits, estimate_entropy
from .guess_space import (
    APPROXIMATE,
    VERY_LARGE_LABEL,
    CrackTimeEstimate,
    GuessSpace,
    estimate_crack_time,
    estimate_guess_space,
    parse_rate,
)
from .rating import Rating, Thresholds, parse_thresholds, rate

STATUS_OK = "ok"
STATUS_EMPTY = "empty"
STATUS_UNEVALUABLE = "unevaluable"

NOTE_EMPTY = "Input is empty."
NOTE_UNEVALUABLE = "Not evaluable (alphabet size 0 or length 0)."
NOTE_UUID = "UUIDv4: entropy fixed at ~122 bits (version/variant nibbles are fixed); approximate."
NOTE_BASE64_PADDING = "Base64-ish: '=' padding is not counted in the alphabet (approximation)."
NOTE_APPROXIMATE_SPACE = "Guess space computed in floating point (approximate)."
NOTE_VERY_LARGE_SPACE = "Guess space not computed exactly (alphabet size <= 1 or token too long)."


@dataclass(frozen=True)
class AnalysisResult:
    status: str
    rate: float
    thresholds: Thresholds
    length: int = 0
    alphabet: Optional[AlphabetDescriptor] = None
    entropy: Optional[EntropyResult] = None
    empirical_bits: Optional[float] = None
    guess_space: Optional[GuessSpace] = None
    crack_time: Optional[CrackTimeEstimate] = None
    rating: Optional[Rating] = None
    notes: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def theoretical_bits(self) -> Optional[float]:
        return self.entropy.theoretical_bits if self.entropy else None

    def to_dict(self) -> Dict:
        """JSON-ready view; exact guess spaces are emitted as decimal strings."""
        data = {
            "status": self.status,
            "length": self.length,
            "rate": self.rate,
            "thresholds": {
                "weak": self.thresholds.weak,
                "ok": self.thresholds.ok,
                "strong": self.thresholds.strong,
            },
            "alphabet": None,
            "theoretical_bits": self.theoretical_bits,
            "empirical_bits": self.empirical_bits,
            "guess_space": None,
            "crack_time": None,
            "rating": None,
            "notes": list(self.notes),
        }
        if self.alphabet:
            data["alphabet"] = {
                "format": self.alphabet.format.value,
                "label": self.alphabet.label,
                "size": self.alphabet.size,
            }
        if self.guess_space:
            value = self.guess_space.value
            data["guess_space"] = {
                "kind": self.guess_space.kind,
                "display": self.guess_space.display,
                "value": str(value) if self.guess_space.is_exact else value,
            }
        if self.crack_time:
            data["crack_time"] = {
                "seconds": self.crack_time.seconds,
                "display": self.crack_time.display,
            }
        if self.rating:
            data["rating"] = {
                "level": self.rating.level.value,
                "percent": round(self.rating.percent, 1),
            }
        return data


def _notes_for(alphabet: AlphabetDescriptor, space: GuessSpace) -> Tuple[str, ...]:
    notes = []
    if alphabet.format == TokenFormat.UUID_V4:
        notes.append(NOTE_UUID)
    elif alphabet.format == TokenFormat.BASE64_ISH:
        notes.append(NOTE_BASE64_PADDING)

    if space.kind == APPROXIMATE:
        notes.append(NOTE_APPROXIMATE_SPACE)
    elif space.display == VERY_LARGE_LABEL:
        notes.append(NOTE_VERY_LARGE_SPACE)
    return tuple(notes)


def analyze(token: str, rate_value=None, thresholds=None, exact: bool = True) -> AnalysisResult:
    """
    Analyze one token.

    rate_value and thresholds may be raw strings (as typed by a user) or
    already-parsed values; invalid input falls back to the defaults.
    """
    guess_rate = parse_rate(rate_value)
    limits = parse_thresholds(thresholds)

    if not token:
        return AnalysisResult(STATUS_EMPTY, guess_rate, limits, notes=(NOTE_EMPTY,))

    length = len(token)
    alphabet = detect_alphabet(token)
    entropy = estimate_entropy(token, alphabet)
    if entropy is None:
        return AnalysisResult(
            STATUS_UNEVALUABLE,
            guess_rate,
            limits,
            length=length,
            alphabet=alphabet,
            empirical_bits=empirical_bits(token),
            notes=(NOTE_UNEVALUABLE,),
        )

    space = estimate_guess_space(alphabet, length, exact=exact)
    crack_time = estimate_crack_time(entropy.theoretical_bits, guess_rate)
    return AnalysisResult(
        STATUS_OK,
        guess_rate,
        limits,
        length=length,
        alphabet=alphabet,
        entropy=entropy,
        empirical_bits=entropy.empirical_bits,
        guess_space=space,
        crack_time=crack_time,
        rating=rate(entropy.theoretical_bits, limits),
        notes=_notes_for(alphabet, space),
    )
