# pipeline/config.py
#
# Pipeline configuration loaded from environment variables.
#
# Design decisions:
#   - Frozen dataclass (not pydantic Settings): the pipeline is a standalone
#     offline process and pydantic is reserved for the API layer.
#   - FIRESTORE_PROJECT_ID has no default: without it there is no document
#     store to export from, so load_config refuses to build a config.
#   - FIRESTORE_TOKEN is optional. Collections readable without auth (or an
#     emulator) work with an empty token.
#   - Paths default to pipeline/data relative to this file's directory so the
#     pipeline works out of the box after a fresh checkout.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent

FIRESTORE_BASE_URL = "https://firestore.googleapis.com/v1"

# Collection names in the document store.
COLECAO_EMPREENDIMENTOS = "empreendimentos"
COLECAO_PONTOS = "pontos_captacao"


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration.

    Invariants:
      - firestore_project_id is always non-empty (enforced by load_config).
      - download_timeout and page_size are positive integers.
    """

    data_dir: Path
    duckdb_output_path: Path
    firestore_project_id: str
    firestore_token: str = ""
    firestore_base_url: str = FIRESTORE_BASE_URL
    download_timeout: int = 60
    page_size: int = 300

    @property
    def raw_dir(self) -> Path:
        """Directory for the raw JSON exports."""
        return self.data_dir / "raw"

    @property
    def staging_dir(self) -> Path:
        """Directory for cleaned Parquet staging files."""
        return self.data_dir / "staging"

    @property
    def documents_url(self) -> str:
        return (
            f"{self.firestore_base_url}/projects/{self.firestore_project_id}"
            "/databases/(default)/documents"
        )


def load_config() -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if FIRESTORE_PROJECT_ID is not set.
    """
    project_id = os.environ.get("FIRESTORE_PROJECT_ID")
    if not project_id:
        raise ValueError(
            "FIRESTORE_PROJECT_ID environment variable is required. "
            "Set it before running the pipeline."
        )

    data_dir = Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    duckdb_output_path = Path(
        os.environ.get(
            "DUCKDB_OUTPUT_PATH",
            str(data_dir / "output" / "pontos_captacao.duckdb"),
        )
    )

    return PipelineConfig(
        data_dir=data_dir,
        duckdb_output_path=duckdb_output_path,
        firestore_project_id=project_id,
        firestore_token=os.environ.get("FIRESTORE_TOKEN", ""),
        firestore_base_url=os.environ.get("FIRESTORE_BASE_URL", FIRESTORE_BASE_URL),
        download_timeout=int(os.environ.get("PIPELINE_DOWNLOAD_TIMEOUT", "60")),
        page_size=int(os.environ.get("PIPELINE_PAGE_SIZE", "300")),
    )
