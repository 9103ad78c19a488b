"""Helpers to normalize terms before they become graph nodes."""

from __future__ import annotations

import unicodedata
from typing import Protocol

from .errors import NormalizationError
from .models import NormalizedTerm

__all__ = [
    "TermNormalizer",
    "AnalyzerNormalizer",
    "format_term",
]


class TermNormalizer(Protocol):
    """Anything that turns raw rule text into a :data:`NormalizedTerm`."""

    def normalize(self, text: str) -> NormalizedTerm:
        ...


class AnalyzerNormalizer:
    """Whitespace analyzer producing one tuple entry per token.

    Text is NFKC-normalized and, unless ``lowercase`` is disabled, lowercased
    before splitting. Terms without any token are rejected because an empty
    term cannot be matched during analysis.
    """

    def __init__(self, lowercase: bool = True) -> None:
        self.lowercase = lowercase

    def normalize(self, text: str) -> NormalizedTerm:
        value = unicodedata.normalize("NFKC", text)
        if self.lowercase:
            value = value.lower()
        tokens = tuple(value.split())
        if not tokens:
            raise NormalizationError(text, "analyzed to a zero-length token")
        return tokens

    def __repr__(self) -> str:
        return f"AnalyzerNormalizer(lowercase={self.lowercase!r})"


def format_term(term: NormalizedTerm) -> str:
    """Render a normalized term for logs and exports."""
    return " ".join(term)
