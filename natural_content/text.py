"""Text normalization, sentence splitting and word extraction."""

from __future__ import annotations

import re
import unicodedata
import warnings
from typing import List

from bs4 import BeautifulSoup, FeatureNotFound, MarkupResemblesLocatorWarning  # type: ignore

from .stopwords import get_stopwords

WORD_SEPARATOR = " "

_LINE_BREAK_RE = re.compile(r"[\t\n\r]")
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_STATEMENT_END_RE = re.compile(r"[.!?]+")
# Characters treated as word boundaries when extracting words.
_PUNCTUATION_RE = re.compile(r"['’«»\";:,./()!?\\-]")
# Characters turned into spaces before non-letters are dropped.
_SPECIALS_RE = re.compile(r"[|&’«»'\"/()!?\\-]")


def _strip_html(text: str) -> str:
    """Replace complete tags with spaces and decode entities.

    A ``<`` that never closes, as in ``a<b``, is plain text and survives.
    """

    if "<" not in text and "&" not in text:
        return text
    cleaned = _TAG_RE.sub(WORD_SEPARATOR, text)
    if "&" not in cleaned:
        return cleaned
    # Leftover brackets are escaped so the parser cannot open a tag on them.
    escaped = cleaned.replace("<", "&lt;").replace(">", "&gt;")
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        try:
            soup = BeautifulSoup(escaped, "lxml")
        except FeatureNotFound:
            soup = BeautifulSoup(escaped, "html.parser")
    return soup.get_text(WORD_SEPARATOR)


def normalize(text: str) -> str:
    """Return plain text with markup removed and whitespace collapsed."""

    if not text:
        return ""
    cleaned = _LINE_BREAK_RE.sub(WORD_SEPARATOR, text)
    cleaned = _strip_html(cleaned)
    return _WHITESPACE_RE.sub(WORD_SEPARATOR, cleaned).strip()


def remove_specials(text: str) -> str:
    """Keep only letters and single spaces.

    Separator characters such as quotes, slashes and hyphens become spaces so
    ``avant-hier`` turns into ``avant hier``; digits and every other
    non-letter character are dropped.
    """

    cleaned = _SPECIALS_RE.sub(WORD_SEPARATOR, normalize(text))
    kept = "".join(ch for ch in cleaned if ch.isalpha() or ch.isspace())
    return _WHITESPACE_RE.sub(WORD_SEPARATOR, kept).strip()


def remove_diacritics(text: str) -> str:
    """Return ``text`` with accents and other combining marks removed."""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped)


def get_statements(text: str) -> List[str]:
    """Split text into sentence-like statements on ``.``, ``!`` and ``?``."""

    parts = _STATEMENT_END_RE.split(normalize(text))
    return [part.strip() for part in parts if part.strip()]


def tokenize(text: str) -> List[str]:
    """Return lower-cased word tokens from the provided text or HTML."""

    cleaned = _PUNCTUATION_RE.sub(WORD_SEPARATOR, normalize(text))
    return cleaned.lower().split()


def get_words(
    text: str,
    with_stop_words: bool = True,
    language: str | None = None,
    *,
    drop_numeric: bool = False,
) -> List[str]:
    """Return the words of a text, optionally without stop words.

    When ``with_stop_words`` is False, ``language`` selects the stop-word
    list; tokens are compared without their diacritics, so ``bientôt``
    matches the listed ``bientot``. ``drop_numeric`` removes tokens made only
    of digits.
    """

    words = tokenize(text)
    if drop_numeric:
        words = [word for word in words if not word.isdecimal()]
    if with_stop_words:
        return words
    stopwords = get_stopwords(language)
    return [word for word in words if remove_diacritics(word) not in stopwords]


def is_stop_word(token: str, language: str | None) -> bool:
    """Return True when ``token`` is in the stop-word list of ``language``."""

    return remove_diacritics(token.lower()) in get_stopwords(language)
