"""Password alphabet and the byte filter that draws from it.

Raw random bytes are kept only when their value is exactly the code of an
alphabet character. Bytes are never reduced modulo the alphabet size, so every
survivor is uniformly distributed over the alphabet.
"""

from __future__ import annotations

import string

# All ASCII punctuation except the single quote.
PUNCTUATION = "".join(ch for ch in string.punctuation if ch != "'")

ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase + PUNCTUATION

ALPHABET_BYTES: frozenset[int] = frozenset(ALPHABET.encode("ascii"))


def filter_to_alphabet(raw: bytes) -> str:
    """Return the bytes of `raw` that are alphabet characters, in stream order."""

    return bytes(b for b in raw if b in ALPHABET_BYTES).decode("ascii")
