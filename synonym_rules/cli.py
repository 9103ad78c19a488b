import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import storage
from .config import load_settings
from .errors import SynonymParseError
from .normalizer import AnalyzerNormalizer
from .parser import SynonymRuleParser


def _build_graph(args: argparse.Namespace):
    normalizer = AnalyzerNormalizer(lowercase=args.lowercase)
    return storage.load_graph(
        args.input,
        expand=args.expand,
        dedup=args.dedup,
        normalizer=normalizer,
    )


def parse(args: argparse.Namespace) -> None:
    """Parse a rule file and write the synonym graph as JSON."""

    try:
        graph = _build_graph(args)
    except SynonymParseError as e:
        logging.warning("Synonymregeln %s fehlerhaft: %s", args.input, e)
        raise SystemExit(f"invalid synonym rules: {e}")

    if args.output:
        storage.save_graph(graph, args.output)
        logging.info("Graph nach %s geschrieben", args.output)
    else:
        data = storage.graph_to_dict(graph)
        sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")


def validate(args: argparse.Namespace) -> None:
    """Validate a rule file without writing anything."""

    try:
        _build_graph(args)
    except SynonymParseError as e:
        logging.warning("Synonymregeln %s fehlerhaft: %s", args.input, e)
        raise SystemExit(f"invalid synonym rules: {e}")

    print(f"Rules '{args.input}' OK")


def stats(args: argparse.Namespace) -> None:
    """Show statistics about a rule file."""

    text = storage.read_rules_text(args.input)
    lines = list(storage.iter_rule_lines(text))
    parser = SynonymRuleParser(
        dedup=args.dedup,
        expand=args.expand,
        normalizer=AnalyzerNormalizer(lowercase=args.lowercase),
    )
    total_groups = sum(len(parser.split_groups(line)) for line in lines)
    try:
        parser.parse(lines)
    except SynonymParseError as e:
        raise SystemExit(f"invalid synonym rules: {e}")
    graph = parser.build()

    print(f"Lines: {len(lines)}")
    print(f"Groups: {total_groups}")
    print(f"Inputs: {len(graph)}")
    print(f"Edges: {graph.edge_count}")


def main(argv: List[str] | None = None) -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Synonym rules utility")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase verbosity")
    parser.add_argument("--log-file", type=Path, default=None, help="write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "input",
            type=Path,
            nargs="?",
            default=settings.rules_path,
            help="rule file (defaults to rules_path from config.ini)",
        )
        p.add_argument(
            "--expand",
            action=argparse.BooleanOptionalAction,
            default=settings.expand,
            help="make all terms of a group interchangeable",
        )
        p.add_argument(
            "--dedup",
            action=argparse.BooleanOptionalAction,
            default=settings.dedup,
            help="drop identical edges",
        )
        p.add_argument(
            "--lowercase",
            action=argparse.BooleanOptionalAction,
            default=settings.lowercase,
            help="lowercase terms before matching",
        )

    p = sub.add_parser("parse", help="parse rules and print the graph")
    add_common(p)
    p.add_argument(
        "--output",
        type=Path,
        default=None,
        help="write result to this file instead of stdout",
    )
    p.set_defaults(func=parse)

    p = sub.add_parser("validate", help="validate synonym rules")
    add_common(p)
    p.set_defaults(func=validate)

    p = sub.add_parser("stats", help="show statistics")
    add_common(p)
    p.set_defaults(func=stats)

    args = parser.parse_args(argv)
    if args.input is None:
        raise SystemExit(
            "no synonym rules given: pass a rule file or set rules_path in config.ini"
        )

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=handlers)

    args.func(args)


if __name__ == "__main__":
    main()
