"""In-memory synonym graph builder.

The parser only knows the :class:`GraphBuilder` protocol; this module ships
the default implementation that collects edges per input term and freezes
them into a :class:`~synonym_rules.models.SynonymGraph`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Protocol

from .models import NormalizedTerm, SynonymGraph, SynonymRule

logger = logging.getLogger(__name__)

__all__ = ["GraphBuilder", "SynonymGraphBuilder"]


class GraphBuilder(Protocol):
    """Receiver of directed synonym edges."""

    def add_edge(
        self, input: NormalizedTerm, output: NormalizedTerm, include_original: bool
    ) -> None:
        ...

    def finalize_build(self) -> SynonymGraph:
        ...


class _WorkingRule:
    __slots__ = ("outputs", "include_original")

    def __init__(self) -> None:
        self.outputs: List[NormalizedTerm] = []
        self.include_original = False


class SynonymGraphBuilder:
    """Collect edges and build an immutable :class:`SynonymGraph`.

    With ``dedup`` enabled an (input, output) pair is stored only once.
    ``include_original`` is tracked per input term: once any edge for an
    input asks to keep the original token, the input keeps it.
    """

    def __init__(self, dedup: bool = True) -> None:
        self.dedup = dedup
        self._working: Dict[NormalizedTerm, _WorkingRule] = {}
        self._max_horizontal_context = 0
        self._edge_count = 0

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_edge(
        self, input: NormalizedTerm, output: NormalizedTerm, include_original: bool
    ) -> None:
        if not input:
            raise ValueError("input term must not be empty")
        if not output:
            raise ValueError("output term must not be empty")

        rule = self._working.get(input)
        if rule is None:
            rule = self._working[input] = _WorkingRule()

        if self.dedup and output in rule.outputs:
            logger.debug("Doppelte Kante ignoriert: %s -> %s", input, output)
        else:
            rule.outputs.append(output)
            self._edge_count += 1
        rule.include_original |= include_original

        self._max_horizontal_context = max(
            self._max_horizontal_context, len(input), len(output)
        )

    def finalize_build(self) -> SynonymGraph:
        rules = {
            source: SynonymRule(tuple(rule.outputs), rule.include_original)
            for source, rule in self._working.items()
        }
        logger.debug(
            "Synonymgraph gebaut: %d Eingaben, %d Kanten", len(rules), self._edge_count
        )
        return SynonymGraph(
            rules=MappingProxyType(rules),
            max_horizontal_context=self._max_horizontal_context,
        )
