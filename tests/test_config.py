from __future__ import annotations

import importlib

import pytest

from lexilens.core import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key in ("CORS_ORIGINS", "LEXILENS_MAX_TEXT_LENGTH", "LEXILENS_LEXICON_PATH", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    cfg = reload_config()
    assert cfg.CORS_ORIGINS == ["*"]
    assert cfg.MAX_TEXT_LENGTH == 200_000
    assert cfg.LEXICON_PATH_OVERRIDE is None
    assert cfg.LOG_LEVEL == "INFO"


def test_cors_origins_are_split_and_trimmed(reload_config):
    cfg = reload_config(CORS_ORIGINS=" http://localhost:5173 , ,http://127.0.0.1:8000")
    assert cfg.CORS_ORIGINS == ["http://localhost:5173", "http://127.0.0.1:8000"]


def test_max_text_length_from_env(reload_config):
    assert reload_config(LEXILENS_MAX_TEXT_LENGTH="500").MAX_TEXT_LENGTH == 500


def test_invalid_max_text_length_falls_back_to_default(reload_config):
    assert reload_config(LEXILENS_MAX_TEXT_LENGTH="lots").MAX_TEXT_LENGTH == 200_000


def test_lexicon_path_override_from_env(reload_config):
    cfg = reload_config(LEXILENS_LEXICON_PATH=" /tmp/custom.yaml ")
    assert cfg.LEXICON_PATH_OVERRIDE == "/tmp/custom.yaml"
