"""Exceptions raised by the statistics engine."""

from __future__ import annotations

from typing import Iterable, Optional


class NaturalContentError(Exception):
    """Base class for every error raised by natural_content."""


class EmptyDocumentError(NaturalContentError, ValueError):
    """A document produced no terms, so its term frequency is undefined."""

    def __init__(self, index: Optional[int] = None) -> None:
        self.index = index
        if index is None:
            message = "Document has no terms; term frequency is undefined."
        else:
            message = f"Document {index} has no terms; term frequency is undefined."
        super().__init__(message)


class LanguageNotSupportedError(NaturalContentError, LookupError):
    """No stop-word list exists for the requested language code."""

    def __init__(self, language: object, supported: Iterable[str] = ()) -> None:
        self.language = language
        self.supported = tuple(supported)
        choices = ", ".join(self.supported) or "none"
        super().__init__(f"Unsupported stop-word language {language!r} (supported: {choices}).")


class MissingTermStatError(NaturalContentError, KeyError):
    """A term has no accumulated statistics.

    Raised when IDF is computed for a document whose terms were never folded
    into the accumulator, i.e. the TF pass did not run over every document
    first.
    """

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(term)

    def __str__(self) -> str:
        return f"No statistics recorded for term {self.term!r}; run the TF pass over every document first."
