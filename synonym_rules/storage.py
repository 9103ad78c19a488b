"""Storage helpers for synonym rule files.

Rule files emerged from different editors over time, so loading tolerates
UTF-8 (with or without BOM) and UTF-16. Exports write the built graph as JSON
in the format consumed by the search backend tooling.
"""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path
from typing import Dict, Iterator

from .models import SynonymGraph
from .normalizer import TermNormalizer, format_term
from .parser import SynonymRuleParser

logger = logging.getLogger(__name__)

__all__ = [
    "read_rules_text",
    "iter_rule_lines",
    "load_graph",
    "graph_to_dict",
    "save_graph",
]


def read_rules_text(path: str | Path) -> str:
    """Return the decoded content of the rule file at ``path``.

    A missing file raises :class:`FileNotFoundError`; building an empty graph
    from a vanished source would disable every synonym without notice.
    """
    p = Path(path)
    if not p.exists():
        logger.error("Synonymregeln %s nicht gefunden", p)
        raise FileNotFoundError(f"synonym rules not found: {p}")
    raw = p.read_bytes()

    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Synonymregeln %s nicht sauber dekodierbar, ersetze Zeichen", p)
        return raw.decode("utf-8", errors="replace")


def iter_rule_lines(text: str, comment_prefix: str | None = "#") -> Iterator[str]:
    """Yield rule lines from ``text``, skipping blank and comment lines.

    A rule whose first term starts with the comment prefix must escape it,
    e.g. ``\\#tag, tag``.
    """
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if comment_prefix and stripped.startswith(comment_prefix):
            continue
        yield line


def load_graph(
    path: str | Path,
    *,
    expand: bool = False,
    dedup: bool = True,
    normalizer: TermNormalizer | None = None,
    comment_prefix: str | None = "#",
) -> SynonymGraph:
    """Read, parse and build the synonym graph stored at ``path``."""
    text = read_rules_text(path)
    parser = SynonymRuleParser(dedup=dedup, expand=expand, normalizer=normalizer)
    parser.parse(iter_rule_lines(text, comment_prefix))
    graph = parser.build()
    logger.info(
        "Synonymregeln %s geladen: %d Eingaben, %d Kanten",
        path,
        len(graph),
        graph.edge_count,
    )
    return graph


def graph_to_dict(graph: SynonymGraph) -> Dict[str, object]:
    """Return a JSON-serializable representation of ``graph``."""
    rules: Dict[str, object] = {}
    for source, rule in graph.rules.items():
        rules[format_term(source)] = {
            "outputs": [format_term(target) for target in rule.outputs],
            "include_original": rule.include_original,
        }
    return {"rules": rules, "max_horizontal_context": graph.max_horizontal_context}


def save_graph(graph: SynonymGraph, path: str | Path) -> None:
    """Persist ``graph`` as JSON at ``path``."""
    p = Path(path)
    p.write_text(
        json.dumps(graph_to_dict(graph), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
