"""Coordinator for a full corpus TF-IDF pass."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .config import StatsConfig, load_config
from .errors import EmptyDocumentError
from .frequency import get_tf
from .stats import CorpusStatsAccumulator
from .text import get_words
from .tfidf import get_tf_idf
from .types import CorpusResult, DocumentTf

logger = logging.getLogger(__name__)


def get_tf_idfs(
    documents: Sequence[str],
    n: int | None = None,
    with_stop_words: bool | None = None,
    language: str | None = None,
    *,
    config: StatsConfig | None = None,
) -> CorpusResult:
    """Return TF, TF-IDF and per-term statistics for a corpus of texts.

    Documents may be plain text or HTML. Arguments left as ``None`` fall back
    to ``config`` (or the defaults of :func:`load_config`).

    The corpus is read twice: the first pass computes each document's term
    frequencies and counts the documents containing every term, the second
    derives IDF and TF-IDF from those counts. Aggregates are finalized once
    both passes are complete.
    """

    stats_config = config or load_config(None)
    ngram_size = n if n is not None else stats_config.ngram_size
    keep_stop_words = with_stop_words if with_stop_words is not None else stats_config.with_stop_words
    stop_word_language = language if language is not None else stats_config.language
    strict = stats_config.strict_empty_documents

    number_of_docs = len(documents)
    accumulator = CorpusStatsAccumulator()
    logger.debug(
        "Computing TF-IDF for %d documents (n=%s, with_stop_words=%s, language=%s)",
        number_of_docs,
        ngram_size,
        keep_stop_words,
        stop_word_language,
    )

    tfs: List[DocumentTf] = []
    for position, document in enumerate(documents):
        words = get_words(
            document,
            keep_stop_words,
            stop_word_language,
            drop_numeric=stats_config.drop_numeric_tokens,
        )
        try:
            document_tf = get_tf(words, ngram_size, accumulator, strict=strict)
        except EmptyDocumentError:
            raise EmptyDocumentError(position) from None
        if document_tf.is_empty:
            logger.warning("Document %d has no terms; it contributes no statistics", position)
        tfs.append(document_tf)

    weighted = [
        get_tf_idf(document_tf, number_of_docs, accumulator, smooth_idf=stats_config.smooth_idf)
        for document_tf in tfs
    ]

    accumulator.finalize()
    logger.info("Computed TF-IDF for %d documents and %d terms", number_of_docs, len(accumulator))

    return CorpusResult(
        documents=weighted,
        number_of_docs=number_of_docs,
        stats=accumulator.as_dict(),
    )
