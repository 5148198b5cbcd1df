"""Typed data structures produced by the statistics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class DocumentTf:
    """Term counts and normalized term frequencies for one document."""

    count: Dict[str, int]
    tfs: Dict[str, float]
    max_count: int
    tf_idf: Optional[Dict[str, float]] = None

    @property
    def total_terms(self) -> int:
        return sum(self.count.values())

    @property
    def is_empty(self) -> bool:
        return not self.count


@dataclass
class TermStat:
    """Running statistics for one term across the documents of a corpus.

    The list and sum fields grow while documents are folded in; the min, max
    and avg fields stay ``None`` until the accumulator is finalized.
    """

    word: str
    nbr_docs: int = 1
    tfs: List[float] = field(default_factory=list)
    tf_sum: float = 0.0
    idfs: List[float] = field(default_factory=list)
    idf_sum: float = 0.0
    tf_idfs: List[float] = field(default_factory=list)
    tf_idf_sum: float = 0.0

    tf_min: Optional[float] = None
    tf_max: Optional[float] = None
    tf_avg: Optional[float] = None
    idf_max: Optional[float] = None
    idf_avg: Optional[float] = None
    tf_idf_min: Optional[float] = None
    tf_idf_max: Optional[float] = None
    tf_idf_avg: Optional[float] = None


@dataclass(frozen=True)
class CorpusResult:
    """Outcome of a full corpus pass."""

    documents: List[DocumentTf]
    number_of_docs: int
    stats: Dict[str, TermStat]
