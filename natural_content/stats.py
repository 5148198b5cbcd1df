"""Corpus-level term statistics accumulated across documents."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, ItemsView, Optional

from .errors import MissingTermStatError
from .types import TermStat

logger = logging.getLogger(__name__)


class CorpusStatsAccumulator:
    """Mutable per-term bookkeeping for a single corpus pass.

    One instance belongs to exactly one run. The TF pass feeds it through
    :meth:`record_tf`, the TF-IDF pass through :meth:`record_idf`, and
    :meth:`finalize` derives min, max and average values once every document
    has been folded in.
    """

    def __init__(self) -> None:
        self._terms: Dict[str, TermStat] = {}
        self.finalized = False

    def record_tf(self, term: str, tf: float) -> TermStat:
        """Fold one document's frequency for ``term`` into its statistics."""

        stat = self._terms.get(term)
        if stat is None:
            stat = TermStat(word=term, nbr_docs=1, tfs=[tf], tf_sum=tf)
            self._terms[term] = stat
        else:
            stat.nbr_docs += 1
            stat.tfs.append(tf)
            stat.tf_sum += tf
        return stat

    def record_idf(self, term: str, idf: float, tf_idf: float) -> TermStat:
        """Fold one document's IDF and TF-IDF for ``term`` into its statistics."""

        stat = self[term]
        stat.idfs.append(idf)
        stat.idf_sum += idf
        stat.tf_idfs.append(tf_idf)
        stat.tf_idf_sum += tf_idf
        return stat

    def finalize(self) -> None:
        """Compute the derived min, max and average fields for every term."""

        if self.finalized:
            logger.debug("Statistics already finalized; recomputing aggregates for %d terms", len(self._terms))
        for stat in self._terms.values():
            stat.tf_min = min(stat.tfs) if stat.tfs else None
            stat.tf_max = max(stat.tfs) if stat.tfs else None
            stat.tf_avg = stat.tf_sum / stat.nbr_docs

            stat.idf_max = max(stat.idfs) if stat.idfs else None
            stat.idf_avg = stat.idf_sum / stat.nbr_docs if stat.idfs else None

            stat.tf_idf_min = min(stat.tf_idfs) if stat.tf_idfs else None
            stat.tf_idf_max = max(stat.tf_idfs) if stat.tf_idfs else None
            stat.tf_idf_avg = stat.tf_idf_sum / stat.nbr_docs if stat.tf_idfs else None

        self.finalized = True
        logger.debug("Finalized statistics for %d terms", len(self._terms))

    def get(self, term: str, default: Optional[TermStat] = None) -> Optional[TermStat]:
        return self._terms.get(term, default)

    def items(self) -> ItemsView[str, TermStat]:
        return self._terms.items()

    def as_dict(self) -> Dict[str, TermStat]:
        return dict(self._terms)

    def __getitem__(self, term: str) -> TermStat:
        try:
            return self._terms[term]
        except KeyError:
            raise MissingTermStatError(term) from None

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)
