"""Konfiguration der Synonymregeln aus ``config.ini`` und Umgebung.

``config.ini`` liefert die Grundwerte im Abschnitt ``[SYNONYMS]``. Variablen
aus der Umgebung (inklusive einer ``.env``-Datei, geladen über
python-dotenv) überschreiben sie, damit Deployments ohne Dateiänderung
umgestellt werden können.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import ParserConfig

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.ini"
SECTION = "SYNONYMS"

ENV_EXPAND = "SYNONYM_EXPAND"
ENV_DEDUP = "SYNONYM_DEDUP"
ENV_LOWERCASE = "SYNONYM_LOWERCASE"
ENV_RULES_PATH = "SYNONYM_RULES_PATH"


@dataclass(frozen=True)
class SynonymSettings:
    """Resolved settings for parsing synonym rules."""

    expand: bool = False
    dedup: bool = True
    lowercase: bool = True
    rules_path: Optional[Path] = None

    def parser_config(self) -> ParserConfig:
        return ParserConfig(expand=self.expand, dedup=self.dedup)


def _read_config(path: Path) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if path.exists():
        # utf-8-sig tolerates a BOM written by Windows editors
        cfg.read(path, encoding="utf-8-sig")
    return cfg


def _to_bool(raw: str, name: str, default: bool) -> bool:
    value = raw.strip().lower()
    if value in configparser.ConfigParser.BOOLEAN_STATES:
        return configparser.ConfigParser.BOOLEAN_STATES[value]
    logger.warning("Ignoriere ungueltigen Wahrheitswert fuer %s: %s", name, raw)
    return default


def _get_bool(
    cfg: configparser.ConfigParser, option: str, env_name: str, default: bool
) -> bool:
    env_value = os.getenv(env_name)
    if env_value is not None and env_value.strip():
        return _to_bool(env_value, env_name, default)
    raw = cfg.get(SECTION, option, fallback=None)
    if raw is None or not raw.strip():
        return default
    return _to_bool(raw, f"{SECTION}.{option}", default)


def load_settings(path: str | Path | None = None) -> SynonymSettings:
    """Return the synonym settings from ``path`` (default ``config.ini``)."""
    load_dotenv()
    config_path = Path(path) if path is not None else CONFIG_PATH
    cfg = _read_config(config_path)

    rules_path: Optional[Path] = None
    env_rules = (os.getenv(ENV_RULES_PATH) or "").strip()
    file_rules = cfg.get(SECTION, "rules_path", fallback="").strip()
    if env_rules:
        rules_path = Path(env_rules)
    elif file_rules:
        # relative paths in the file are relative to the file itself
        rules_path = config_path.parent / file_rules

    return SynonymSettings(
        expand=_get_bool(cfg, "expand", ENV_EXPAND, False),
        dedup=_get_bool(cfg, "dedup", ENV_DEDUP, True),
        lowercase=_get_bool(cfg, "lowercase", ENV_LOWERCASE, True),
        rules_path=rules_path,
    )
