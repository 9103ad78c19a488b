"""Exceptions raised while turning synonym rules into graph edges."""

from __future__ import annotations


class SynonymParseError(ValueError):
    """Base class for every error that aborts a synonym parse."""


class InvalidMappingError(SynonymParseError):
    """A mapping group did not decompose into exactly two terms."""

    def __init__(self, group: str) -> None:
        super().__init__(f"synonym mapping is invalid for {group}")
        self.group = group


class NormalizationError(SynonymParseError):
    """The term normalizer could not produce a usable term."""

    def __init__(self, term: str, reason: str) -> None:
        super().__init__(f"term: {term} {reason}")
        self.term = term
        self.reason = reason
