# src/token_check/numfmt.py
import math

ELLIPSIS = "…"
INFINITY_LABEL = "∞"

# Largest unit first; only the first two that apply are shown
DURATION_UNITS = [
    ("year", 365 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("min", 60),
    ("sec", 1),
]


def format_big_int_approx(num: int) -> str:
    """Render a big integer as-is up to 6 digits, else as '429… ×10^9'."""
    s = str(num)
    if len(s) <= 6:
        return s
    return f"{s[:3]}{ELLIPSIS} ×10^{len(s) - 1}"


def format_float_approx(num: float) -> str:
    """Floating fallback for values that were never computed exactly."""
    if not math.isfinite(num):
        return INFINITY_LABEL
    if num == 0:
        return "0"
    exp = math.floor(math.log10(abs(num)))
    mantissa = num / 10 ** exp
    return f"{mantissa:.2f} ×10^{exp}"


def format_duration(seconds: float) -> str:
    if not math.isfinite(seconds):
        return INFINITY_LABEL
    if seconds < 1e-6:
        return f"{seconds * 1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.2f} µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f} ms"

    rem = int(seconds)
    parts = []
    for label, size in DURATION_UNITS:
        if rem >= size:
            value = rem // size
            parts.append(f"{value} {label}{'s' if value > 1 else ''}")
            rem = rem % size
            if len(parts) >= 2:
                break
    return " ".join(parts) if parts else "0 sec"
