import re
import string

# Structured formats, full-match only
UUID_V4 = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

HEX = re.compile(r"[0-9a-fA-F]+")

# Up to two '=' of padding, at least two alphabet characters
BASE64_ISH = re.compile(r"[A-Za-z0-9+/]{2,}={0,2}")

# 32 printable ASCII symbols; space is its own class
ASCII_SYMBOLS = string.punctuation

CHARACTER_CLASSES = [
    # (label, pattern, alphabet contribution)
    ("a-z", re.compile(r"[a-z]"), 26),
    ("A-Z", re.compile(r"[A-Z]"), 26),
    ("0-9", re.compile(r"[0-9]"), 10),
    ("symbols", re.compile("[" + re.escape(ASCII_SYMBOLS) + "]"), len(ASCII_SYMBOLS)),
    ("space", re.compile(r"[ ]"), 1),
]
