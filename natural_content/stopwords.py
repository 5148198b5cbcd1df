"""Per-language stop-word lists."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet

import yaml

from .errors import LanguageNotSupportedError

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"

SUPPORTED_LANGUAGES = ("en", "fr")


def _normalize_code(language: object) -> str:
    if not isinstance(language, str):
        raise LanguageNotSupportedError(language, SUPPORTED_LANGUAGES)
    code = language.strip().lower()
    if code not in SUPPORTED_LANGUAGES:
        raise LanguageNotSupportedError(language, SUPPORTED_LANGUAGES)
    return code


@lru_cache(maxsize=None)
def _load(code: str) -> FrozenSet[str]:
    path = DATA_DIR / f"stopwords-{code}.yaml"
    with path.open("r", encoding="utf-8") as stream:
        words = yaml.safe_load(stream) or []
    logger.debug("Loaded %d stop words for %s from %s", len(words), code, path)
    return frozenset(str(word).strip().lower() for word in words if str(word).strip())


def get_stopwords(language: str | None) -> FrozenSet[str]:
    """Return the stop words of ``language``, stored without diacritics.

    Raises :class:`LanguageNotSupportedError` for unknown codes.
    """

    return _load(_normalize_code(language))
