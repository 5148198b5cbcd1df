"""TF-IDF weighting of per-document term frequencies."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Dict

from .stats import CorpusStatsAccumulator
from .types import DocumentTf


def get_idf(number_of_docs: int, nbr_docs: int, smooth: bool = True) -> float:
    """Return the inverse document frequency of a term.

    The smoothed form adds 1 so a term present in every document keeps a
    weight of 1.0 instead of 0.0.
    """

    idf = math.log(number_of_docs / nbr_docs)
    return idf + 1 if smooth else idf


def get_tf_idf(
    document: DocumentTf,
    number_of_docs: int,
    stats: CorpusStatsAccumulator,
    *,
    smooth_idf: bool = True,
) -> DocumentTf:
    """Return a copy of ``document`` carrying the TF-IDF of each of its terms.

    ``stats`` must already hold the document counts of the whole corpus; a
    term it does not know raises :class:`MissingTermStatError`. The IDF and
    TF-IDF values are folded back into ``stats``.
    """

    if number_of_docs < 1:
        raise ValueError(f"number_of_docs must be at least 1; got {number_of_docs}.")

    tf_idf: Dict[str, float] = {}
    for term, tf in document.tfs.items():
        idf = get_idf(number_of_docs, stats[term].nbr_docs, smooth=smooth_idf)
        tf_idf[term] = tf * idf
        stats.record_idf(term, idf, tf_idf[term])

    return replace(document, tf_idf=tf_idf)
