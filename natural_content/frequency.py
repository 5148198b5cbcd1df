"""Per-document term frequencies."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

from .errors import EmptyDocumentError
from .ngrams import get_ngrams
from .stats import CorpusStatsAccumulator
from .types import DocumentTf


def get_tf(
    words: Sequence[str],
    n: int | None = None,
    stats: CorpusStatsAccumulator | None = None,
    *,
    strict: bool = False,
) -> DocumentTf:
    """Return term counts and normalized term frequencies for one document.

    ``tfs[term]`` is the term count divided by the count of the most frequent
    term, so the most frequent term always scores 1.0. When ``n`` is greater
    than 1 the words are collapsed into n-grams first.

    When ``stats`` is given, every distinct term's frequency is folded into
    it. A document without terms yields empty maps and ``max_count == 0``,
    or raises :class:`EmptyDocumentError` when ``strict`` is set.
    """

    terms = get_ngrams(words, n) if n and n > 1 else list(words)

    count: Dict[str, int] = dict(Counter(terms))
    if not count:
        if strict:
            raise EmptyDocumentError()
        return DocumentTf(count={}, tfs={}, max_count=0)

    max_count = max(count.values())
    tfs: Dict[str, float] = {}
    for term, occurrences in count.items():
        tfs[term] = occurrences / max_count
        if stats is not None:
            stats.record_tf(term, tfs[term])

    return DocumentTf(count=count, tfs=tfs, max_count=max_count)
