"""Flask-Blueprint mit Endpunkten zum Prüfen und Parsen von Synonymregeln.

Die Endpunkte nehmen Regeltext direkt im JSON-Body entgegen und liefern die
erzeugten Kanten zurück, so dass Redaktionswerkzeuge Regeln vor dem Einspielen
validieren können.
"""

from __future__ import annotations

import logging
from typing import Any, Tuple

from flask import Blueprint, jsonify, request

from .config import load_settings
from .errors import SynonymParseError
from .normalizer import AnalyzerNormalizer, format_term
from .parser import SynonymRuleParser
from .storage import graph_to_dict

logger = logging.getLogger(__name__)

bp = Blueprint("synonym_rules", __name__, url_prefix="/api/synonyms")


def _parser_from_payload(data: dict) -> SynonymRuleParser:
    settings = load_settings()
    defaults = settings.parser_config()
    expand = data.get("expand")
    dedup = data.get("dedup")
    return SynonymRuleParser(
        dedup=dedup if isinstance(dedup, bool) else defaults.dedup,
        expand=expand if isinstance(expand, bool) else defaults.expand,
        normalizer=AnalyzerNormalizer(lowercase=settings.lowercase),
    )


def _rules_from_payload() -> Tuple[dict, Any]:
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    return data, data.get("rules")


@bp.route("/", methods=["GET"])
def root() -> Any:
    """Einfacher Bereitschaftsendpunkt."""
    return jsonify({"status": "ok"})


@bp.route("/parse", methods=["POST"])
def parse() -> Any:
    """Parst ``rules`` und liefert Kanten sowie den gebauten Graphen."""
    data, rules = _rules_from_payload()
    if not isinstance(rules, str):
        return jsonify({"error": "'rules' must be a string"}), 400

    parser = _parser_from_payload(data)
    try:
        parser.parse(rules)
    except SynonymParseError as exc:
        logger.warning("Synonymregeln abgelehnt: %s", exc)
        return jsonify({"error": str(exc)}), 400
    graph = parser.build()

    edges = [
        {
            "input": format_term(edge.input),
            "output": format_term(edge.output),
            "include_original": edge.include_original,
        }
        for edge in graph.edges()
    ]
    return jsonify({"edges": edges, "graph": graph_to_dict(graph)})


@bp.route("/validate", methods=["POST"])
def validate() -> Any:
    """Prüft ``rules`` ohne Ergebnis zurückzugeben."""
    data, rules = _rules_from_payload()
    if not isinstance(rules, str):
        return jsonify({"valid": False, "error": "'rules' must be a string"}), 400

    try:
        _parser_from_payload(data).parse(rules)
    except SynonymParseError as exc:
        logger.warning("Synonymregeln abgelehnt: %s", exc)
        return jsonify({"valid": False, "error": str(exc)}), 400
    return jsonify({"valid": True})
