# tests/pipeline/test_pipeline_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.config import FIRESTORE_BASE_URL, PipelineConfig, load_config


def test_load_config_exige_project_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FIRESTORE_PROJECT_ID", raising=False)
    with pytest.raises(ValueError, match="FIRESTORE_PROJECT_ID"):
        load_config()


def test_load_config_le_variaveis(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FIRESTORE_PROJECT_ID", "demo")
    monkeypatch.setenv("FIRESTORE_TOKEN", "tok")
    monkeypatch.setenv("PIPELINE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PIPELINE_PAGE_SIZE", "50")
    monkeypatch.delenv("DUCKDB_OUTPUT_PATH", raising=False)

    config = load_config()

    assert config.firestore_project_id == "demo"
    assert config.firestore_token == "tok"
    assert config.page_size == 50
    assert config.raw_dir == tmp_path / "raw"
    assert config.staging_dir == tmp_path / "staging"
    assert config.duckdb_output_path == tmp_path / "output" / "pontos_captacao.duckdb"


def test_documents_url() -> None:
    config = PipelineConfig(data_dir=Path("d"), duckdb_output_path=Path("o.duckdb"), firestore_project_id="demo")
    assert config.documents_url == f"{FIRESTORE_BASE_URL}/projects/demo/databases/(default)/documents"
