# src/token_check/output.py
import json
from typing import List, Optional, Tuple

from .analyzer import AnalysisResult
from .detector import TokenFormat
from .rating import RATING_ORDER, RatingLevel

BAR_WIDTH = 30
MASK_KEEP = 4


class Color:
    RESET = "\033[0m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"


def color_for_rating(level: Optional[RatingLevel]) -> str:
    if level == RatingLevel.WEAK:
        return Color.RED
    if level == RatingLevel.MODERATE:
        return Color.YELLOW
    if level == RatingLevel.STRONG:
        return Color.GREEN
    return Color.MAGENTA


def _paint(text: str, color: str, use_color: bool) -> str:
    return f"{color}{text}{Color.RESET}" if use_color else text


def rating_label(result: AnalysisResult) -> str:
    return result.rating.level.value if result.rating else "-"


def render_bar(percent: float, width: int = BAR_WIDTH) -> str:
    filled = int(round(percent / 100 * width))
    return "[" + "#" * filled + "." * (width - filled) + f"] {percent:.1f}%"


def mask_token(token: str, keep: int = MASK_KEEP) -> str:
    """Show only the first few characters of a token in tables."""
    if len(token) <= keep:
        return token
    return token[:keep] + "…" + f" ({len(token)} chars)"


def format_report(result: AnalysisResult, use_color: bool = True) -> str:
    """Render one analysis as aligned 'label: value' lines."""
    alphabet = result.alphabet
    rows: List[Tuple[str, str]] = [
        ("Length", str(result.length) if result.status != "empty" else "-"),
        ("Alphabet", alphabet.label if alphabet else "-"),
        ("Alphabet size", (str(alphabet.size) if alphabet.size else "-") if alphabet else "-"),
    ]

    bits = result.theoretical_bits
    if bits is not None:
        approx = " (approx.)" if alphabet.format == TokenFormat.UUID_V4 else ""
        rows.append(("Entropy", f"{bits:.2f} bits{approx}"))
    else:
        rows.append(("Entropy", "-"))
    if result.empirical_bits is not None:
        rows.append(("Empirical entropy", f"{result.empirical_bits:.2f} bits (reference)"))
    else:
        rows.append(("Empirical entropy", "-"))

    rows.append(("Guess space", result.guess_space.display if result.guess_space else "-"))
    rows.append(("Median crack time", result.crack_time.display if result.crack_time else "-"))
    rows.append(("Guess rate", f"{result.rate:g} guesses/sec" if result.crack_time else "-"))

    level = result.rating.level if result.rating else None
    rows.append(("Rating", _paint(rating_label(result), color_for_rating(level), use_color)))
    rows.append(("Strength", render_bar(result.rating.percent) if result.rating else "-"))

    width = max(len(label) for label, _ in rows)
    lines = [f"  {label.ljust(width)} : {value}" for label, value in rows]
    for note in result.notes:
        lines.append(f"  ℹ {note}")
    return "\n".join(lines)


def filter_by_min_rating(pairs: List[Tuple[str, AnalysisResult]], min_rating: Optional[str]):
    """Keep tokens rated at least `min_rating`; unrated tokens are dropped."""
    if min_rating is None:
        return pairs
    floor = RatingLevel(min_rating).rank
    return [(t, r) for t, r in pairs if r.rating and r.rating.level.rank >= floor]


def summarize(results: List[AnalysisResult]) -> dict:
    summary = {level.value: 0 for level in RATING_ORDER}
    summary["unevaluable"] = 0
    summary["empty"] = 0
    for r in results:
        if r.rating:
            summary[r.rating.level.value] += 1
        else:
            summary[r.status] += 1
    return summary


def print_batch(pairs: List[Tuple[str, AnalysisResult]], ci: bool = False, use_color: bool = True):
    """Print one line per token, then a summary. ci=True gives compact lines and a JSON footer."""
    for token, r in pairs:
        bits = f"{r.theoretical_bits:.2f}" if r.theoretical_bits is not None else "-"
        fmt = r.alphabet.format.value if r.alphabet else "-"
        label = rating_label(r) if r.ok else r.status
        if ci:
            print(f"{label} {fmt} {bits} {mask_token(token)}")
        else:
            level = r.rating.level if r.rating else None
            time = r.crack_time.display if r.crack_time else "-"
            print(f"  {_paint(f'[{label}]', color_for_rating(level), use_color)} "
                  f"{mask_token(token)} -> {fmt}, {bits} bits, {time}")

    summary = summarize([r for _, r in pairs])
    if ci:
        print(json.dumps({k.lower(): v for k, v in summary.items()}))
    else:
        print("\nSummary:")
        for key, count in summary.items():
            print(f"  {(key + ':').ljust(13)} {count}")
