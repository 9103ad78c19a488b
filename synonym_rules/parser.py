"""Parser für zeilenbasierte Synonymregeln.

Eine Regelzeile enthält eine oder mehrere Gruppen, getrennt durch ``|``; jede
Gruppe nennt genau zwei Begriffe, getrennt durch ``,``. Beide Trennzeichen
dürfen mit ``\\`` maskiert in einem Begriff vorkommen. Der Parser zerlegt die
Zeilen, normalisiert die Begriffe über den injizierten Normalizer und reicht
gerichtete Kanten an den Graph-Builder weiter::

    a, b|plz, plaza

ergibt ohne ``expand`` die Kanten ``a -> a``, ``b -> a``, ``plz -> plz`` und
``plaza -> plz``; mit ``expand`` werden beide Begriffe einer Gruppe
gegenseitig austauschbar.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, TextIO, Union

from .builder import GraphBuilder, SynonymGraphBuilder
from .errors import InvalidMappingError
from .models import NormalizedTerm, ParserConfig, SynonymGraph
from .normalizer import AnalyzerNormalizer, TermNormalizer
from .scanner import split_escaped, unescape

logger = logging.getLogger(__name__)

__all__ = [
    "GROUP_SEPARATOR",
    "TERM_SEPARATOR",
    "SynonymRuleParser",
    "iter_source_lines",
    "parse_rules",
]

GROUP_SEPARATOR = "|"
TERM_SEPARATOR = ","
TERMS_PER_GROUP = 2

RuleSource = Union[str, TextIO, Iterable[str]]


def iter_source_lines(source: RuleSource) -> Iterable[str]:
    """Yield the lines of ``source`` without their line terminators.

    Strings are split with :meth:`str.splitlines`; anything else is iterated
    line by line, which covers open files and :class:`io.StringIO`.
    """
    if isinstance(source, str):
        yield from source.splitlines()
        return
    for line in source:
        yield line.rstrip("\r\n")


class SynonymRuleParser:
    """Translate synonym rule lines into edges of a synonym graph.

    ``normalizer`` defaults to :class:`AnalyzerNormalizer` and ``builder`` to
    a :class:`SynonymGraphBuilder` honouring ``dedup``. A parser instance is
    meant for a single thread; it keeps no state besides its configuration
    and the builder it feeds.
    """

    def __init__(
        self,
        dedup: bool = True,
        expand: bool = False,
        normalizer: TermNormalizer | None = None,
        builder: GraphBuilder | None = None,
    ) -> None:
        self.config = ParserConfig(expand=expand, dedup=dedup)
        self.normalizer: TermNormalizer = normalizer or AnalyzerNormalizer()
        self.builder: GraphBuilder = (
            builder if builder is not None else SynonymGraphBuilder(dedup=dedup)
        )

    @property
    def expand(self) -> bool:
        return self.config.expand

    @property
    def dedup(self) -> bool:
        return self.config.dedup

    def parse(self, source: RuleSource) -> None:
        """Feed every line of ``source`` to the builder.

        The first malformed group aborts the whole run with
        :class:`InvalidMappingError`; normalizer and I/O errors propagate
        unchanged.
        """
        line_count = 0
        group_count = 0
        for line in iter_source_lines(source):
            line_count += 1
            groups = self.split_groups(line)
            for group in groups:
                self.add_mapping(self.decompose_group(group))
            group_count += len(groups)
        logger.debug("%d Zeilen mit %d Gruppen verarbeitet", line_count, group_count)

    def split_groups(self, line: str) -> List[str]:
        """Return the mapping groups of ``line``; a blank line has none."""
        return split_escaped(line, GROUP_SEPARATOR)

    def decompose_group(self, group: str) -> List[str]:
        """Split ``group`` into exactly two unescaped, trimmed terms."""
        parts = split_escaped(group, TERM_SEPARATOR)
        if len(parts) != TERMS_PER_GROUP:
            raise InvalidMappingError(group)
        # unescape before trimming, never the other way round
        return [unescape(part).strip() for part in parts]

    def add_mapping(self, terms: Sequence[str]) -> None:
        """Normalize ``terms`` and submit the edges for one group."""
        inputs: List[NormalizedTerm] = [self.normalizer.normalize(t) for t in terms]

        if not self.config.expand:
            for term in inputs:
                self.builder.add_edge(term, inputs[0], False)
            return

        for i, source in enumerate(inputs):
            for j, target in enumerate(inputs):
                if i != j:
                    self.builder.add_edge(source, target, True)

    def build(self) -> SynonymGraph:
        """Finalize the builder and return the synonym graph."""
        return self.builder.finalize_build()


def parse_rules(
    source: RuleSource,
    *,
    expand: bool = False,
    dedup: bool = True,
    normalizer: TermNormalizer | None = None,
) -> SynonymGraph:
    """Parse ``source`` with a fresh parser and return the built graph."""
    parser = SynonymRuleParser(dedup=dedup, expand=expand, normalizer=normalizer)
    parser.parse(source)
    return parser.build()
