from __future__ import annotations

import os
from pathlib import Path

import pytest

from mrz_reader import config
from mrz_reader.config import CONFIG, AppConfig


def test_default_config_shape() -> None:
    assert isinstance(CONFIG, AppConfig)
    assert CONFIG.log_level
    assert CONFIG.server.port > 0
    assert isinstance(CONFIG.server.cors_origins, tuple)
    assert isinstance(CONFIG.decode.expose_checks, bool)


def test_dotenv_fills_unset_variables(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MRZ_DOTENV_SAMPLE", raising=False)
    (tmp_path / ".env").write_text('# comment\nMRZ_DOTENV_SAMPLE="from-file"\n')
    monkeypatch.chdir(tmp_path)
    config._load_dotenv()
    assert os.environ["MRZ_DOTENV_SAMPLE"] == "from-file"
    monkeypatch.delenv("MRZ_DOTENV_SAMPLE")


def test_dotenv_skips_undecodable_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MRZ_DOTENV_SAMPLE", raising=False)
    (tmp_path / ".env").write_bytes(b"MRZ_DOTENV_SAMPLE=\xff\xfe\xfa\n")
    monkeypatch.chdir(tmp_path)
    config._load_dotenv()
    assert "MRZ_DOTENV_SAMPLE" not in os.environ
