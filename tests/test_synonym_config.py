import logging
from pathlib import Path

import pytest

from synonym_rules import config
from synonym_rules.models import ParserConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        config.ENV_EXPAND,
        config.ENV_DEDUP,
        config.ENV_LOWERCASE,
        config.ENV_RULES_PATH,
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_config_file(tmp_path):
    settings = config.load_settings(tmp_path / "missing.ini")
    assert settings == config.SynonymSettings()
    assert settings.parser_config() == ParserConfig(expand=False, dedup=True)


def test_reads_section(tmp_path):
    cfg = tmp_path / "config.ini"
    cfg.write_text(
        "[SYNONYMS]\nexpand = yes\ndedup = off\nlowercase = false\n"
        "rules_path = data/rules.txt\n",
        encoding="utf-8",
    )
    settings = config.load_settings(cfg)
    assert settings.expand is True
    assert settings.dedup is False
    assert settings.lowercase is False
    assert settings.rules_path == tmp_path / "data" / "rules.txt"


def test_environment_overrides_file(tmp_path, monkeypatch):
    cfg = tmp_path / "config.ini"
    cfg.write_text("[SYNONYMS]\nexpand = false\n", encoding="utf-8")
    monkeypatch.setenv(config.ENV_EXPAND, "true")
    monkeypatch.setenv(config.ENV_RULES_PATH, "other.txt")
    settings = config.load_settings(cfg)
    assert settings.expand is True
    assert settings.rules_path == Path("other.txt")


def test_invalid_boolean_falls_back_to_default(tmp_path, caplog):
    cfg = tmp_path / "config.ini"
    cfg.write_text("[SYNONYMS]\ndedup = sometimes\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="synonym_rules.config"):
        settings = config.load_settings(cfg)
    assert settings.dedup is True
    assert "sometimes" in caplog.text


def test_repository_config_is_readable():
    settings = config.load_settings()
    assert isinstance(settings.expand, bool)
    assert isinstance(settings.dedup, bool)


def test_repository_rules_path_points_to_sample_rules():
    settings = config.load_settings()
    assert settings.rules_path is not None
    assert settings.rules_path.exists()
