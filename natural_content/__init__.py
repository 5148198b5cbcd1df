"""Term frequency and TF-IDF statistics for plain-text and HTML documents."""

from .config import StatsConfig, load_config
from .errors import (
    EmptyDocumentError,
    LanguageNotSupportedError,
    MissingTermStatError,
    NaturalContentError,
)
from .frequency import get_tf
from .index import get_tf_idfs
from .ngrams import get_ngrams
from .stats import CorpusStatsAccumulator
from .stopwords import SUPPORTED_LANGUAGES, get_stopwords
from .text import get_statements, get_words, is_stop_word, remove_diacritics, remove_specials
from .tfidf import get_idf, get_tf_idf
from .types import CorpusResult, DocumentTf, TermStat

__all__ = [
    "CorpusResult",
    "CorpusStatsAccumulator",
    "DocumentTf",
    "EmptyDocumentError",
    "LanguageNotSupportedError",
    "MissingTermStatError",
    "NaturalContentError",
    "SUPPORTED_LANGUAGES",
    "StatsConfig",
    "TermStat",
    "get_idf",
    "get_ngrams",
    "get_statements",
    "get_stopwords",
    "get_tf",
    "get_tf_idf",
    "get_tf_idfs",
    "get_words",
    "is_stop_word",
    "load_config",
    "remove_diacritics",
    "remove_specials",
]
