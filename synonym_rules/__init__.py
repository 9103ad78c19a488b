"""Parser that turns synonym rule text into synonym graph edges."""

# Package exports should be side-effect free.

from . import (
    models,
    errors,
    scanner,
    normalizer,
    builder,
    parser,
    storage,
)
from .errors import InvalidMappingError, NormalizationError, SynonymParseError
from .parser import SynonymRuleParser, parse_rules

__all__ = [
    "models",
    "errors",
    "scanner",
    "normalizer",
    "builder",
    "parser",
    "storage",
    "InvalidMappingError",
    "NormalizationError",
    "SynonymParseError",
    "SynonymRuleParser",
    "parse_rules",
]
