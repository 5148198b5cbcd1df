"""N-gram construction over token sequences."""

from __future__ import annotations

from typing import List, Sequence

from .text import WORD_SEPARATOR


def get_ngrams(tokens: Sequence[str], n: int) -> List[str]:
    """Return the overlapping n-grams of ``tokens`` as space-joined strings.

    A sequence of ``L`` tokens yields ``max(0, L - n + 1)`` n-grams.
    """

    if n < 1:
        raise ValueError(f"n-gram size must be at least 1; got {n}.")
    count = max(0, len(tokens) - n + 1)
    return [WORD_SEPARATOR.join(tokens[i : i + n]) for i in range(count)]
