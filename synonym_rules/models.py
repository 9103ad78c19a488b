"""Dataclasses representing parsed synonym rules and the resulting graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Tuple

# Canonical representation produced by a term normalizer: one entry per token.
NormalizedTerm = Tuple[str, ...]


@dataclass(frozen=True)
class ParserConfig:
    """Flags fixed when a parser is created.

    Attributes:
        expand: Make all terms of a group interchangeable instead of
            collapsing them onto the first term.
        dedup: Ask the graph builder to drop identical edges.
    """

    expand: bool = False
    dedup: bool = True


@dataclass(frozen=True)
class Edge:
    """Directed relation submitted to the graph builder."""

    input: NormalizedTerm
    output: NormalizedTerm
    include_original: bool


@dataclass(frozen=True)
class SynonymRule:
    """All outputs reachable from one input term."""

    outputs: Tuple[NormalizedTerm, ...] = ()
    include_original: bool = False


@dataclass(frozen=True)
class SynonymGraph:
    """Immutable result of a build.

    ``rules`` maps every input term to its :class:`SynonymRule`;
    ``max_horizontal_context`` is the longest term (in tokens) seen while
    building and bounds how far a consumer has to look ahead.
    """

    rules: Mapping[NormalizedTerm, SynonymRule] = field(default_factory=dict)
    max_horizontal_context: int = 0

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, term: object) -> bool:
        return term in self.rules

    def outputs_for(self, term: NormalizedTerm) -> Tuple[NormalizedTerm, ...]:
        rule = self.rules.get(term)
        if rule is None:
            return ()
        return rule.outputs

    def edges(self) -> Iterator[Edge]:
        """Yield the recorded edges in insertion order."""
        for source, rule in self.rules.items():
            for target in rule.outputs:
                yield Edge(source, target, rule.include_original)

    @property
    def edge_count(self) -> int:
        return sum(len(rule.outputs) for rule in self.rules.values())

