# pipeline/main.py
#
# Pipeline orchestrator: exports the document-store collections, cleans them
# and builds the DuckDB database read by the API.
#
# Design decisions:
#   - run_pipeline is the single entry point. skip_download=True reuses the
#     raw JSON already in raw_dir (tests, or re-running validation offline).
#   - Order: download -> parse -> validate -> staging parquet -> completude
#     -> atomic build. Each step logs its row counts to stdout.
#   - The two collections are downloaded sequentially: they are small and
#     share one HTTP client.
#
# Invariant: the DuckDB file is never replaced unless every step succeeded
# and completude validation passed.
from __future__ import annotations

import sys
from pathlib import Path

import httpx

from pipeline.config import COLECAO_EMPREENDIMENTOS, COLECAO_PONTOS, PipelineConfig, load_config
from pipeline.log import log
from pipeline.output.build_duckdb import build_duckdb
from pipeline.output.completude import validar_completude
from pipeline.sources.firestore.download import download_colecao
from pipeline.sources.firestore.parse import parse_empreendimentos, parse_pontos
from pipeline.sources.firestore.validate import validate_empreendimentos, validate_pontos
from pipeline.staging.parquet_writer import write_staging


def run_pipeline(
    config: PipelineConfig,
    *,
    skip_download: bool = False,
    client: httpx.Client | None = None,
) -> Path:
    """Execute the full pipeline and produce the DuckDB database.

    Args:
        config:        Pipeline configuration.
        skip_download: If True, read ``raw_dir/<colecao>.json`` as-is.
        client:        Optional HTTP client passed to the download step.

    Returns:
        Path to the final DuckDB database file.

    Raises:
        pipeline.output.completude.CompletudeError: if pontos_captacao is
            missing or empty after validation.
        httpx.HTTPStatusError: if the document store rejects a request.
    """
    raw_dir = config.raw_dir
    staging_dir = config.staging_dir
    staging_dir.mkdir(parents=True, exist_ok=True)

    if not skip_download:
        log("Exporting collections...")
        for colecao in (COLECAO_EMPREENDIMENTOS, COLECAO_PONTOS):
            download_colecao(
                config.documents_url,
                colecao,
                raw_dir,
                token=config.firestore_token,
                timeout=config.download_timeout,
                page_size=config.page_size,
                client=client,
            )

    log("Parsing + validating...")
    empreendimentos_raw = raw_dir / f"{COLECAO_EMPREENDIMENTOS}.json"
    if empreendimentos_raw.exists():
        empreendimentos = validate_empreendimentos(parse_empreendimentos(empreendimentos_raw))
        write_staging(empreendimentos, staging_dir, COLECAO_EMPREENDIMENTOS)
        log(f"  empreendimentos: {len(empreendimentos):,} rows")

    pontos_raw = raw_dir / f"{COLECAO_PONTOS}.json"
    if pontos_raw.exists():
        pontos = validate_pontos(parse_pontos(pontos_raw))
        write_staging(pontos, staging_dir, COLECAO_PONTOS)

    log("Validating completude...")
    validar_completude(staging_dir)

    log("Building DuckDB...")
    output_path = build_duckdb(staging_dir, config.duckdb_output_path)
    log(f"Done. DuckDB written to: {output_path}")
    return output_path


if __name__ == "__main__":
    cfg = load_config()
    run_pipeline(cfg, skip_download="--skip-download" in sys.argv[1:])
