"""Configuration helpers for corpus statistics runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

EMPTY_DOCUMENT_POLICIES = ("keep", "raise")


@dataclass(frozen=True)
class StatsConfig:
    """Typed wrapper around the statistics configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    @property
    def ngram_size(self) -> int:
        return int(self.raw.get("ngram_size", 1))

    @property
    def with_stop_words(self) -> bool:
        return bool(self.raw.get("with_stop_words", True))

    @property
    def language(self) -> str:
        return self.raw.get("language", "en")

    @property
    def smooth_idf(self) -> bool:
        return bool(self.raw.get("smooth_idf", True))

    @property
    def drop_numeric_tokens(self) -> bool:
        return bool(self.raw.get("drop_numeric_tokens", False))

    @property
    def strict_empty_documents(self) -> bool:
        return self.raw.get("empty_documents", "keep") == "raise"


DEFAULTS: Dict[str, Any] = {
    "ngram_size": 1,
    "with_stop_words": True,
    "language": "en",
    "smooth_idf": True,
    "drop_numeric_tokens": False,
    "empty_documents": "keep",
}


def load_config(path: str | Path | None = None) -> StatsConfig:
    """Load configuration from YAML, merging with defaults."""

    data: Dict[str, Any] = DEFAULTS.copy()

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            user = yaml.safe_load(stream) or {}
        if not isinstance(user, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping, got {type(user).__name__}.")
        data.update(user)

    validate(data)
    return StatsConfig(data)


def validate(data: Dict[str, Any]) -> None:
    """Reject values the engine cannot run with."""

    policy = data.get("empty_documents")
    if policy not in EMPTY_DOCUMENT_POLICIES:
        raise ValueError(
            f"empty_documents must be one of {', '.join(EMPTY_DOCUMENT_POLICIES)}; got {policy!r}."
        )
    ngram_size = data.get("ngram_size")
    if isinstance(ngram_size, bool) or not isinstance(ngram_size, int) or ngram_size < 1:
        raise ValueError(f"ngram_size must be a positive integer; got {ngram_size!r}.")
