# pipeline/output/completude.py
#
# Completude validation: asserts that the required staging sources are
# present and non-empty before the DuckDB build begins.
#
# Design decisions:
#   - Pure guard: reads files, raises, never writes.
#   - A file with 0 rows counts as missing for required sources: an empty
#     fato_ponto_captacao would serve a dashboard of zeros with no error.
#   - empreendimentos is optional. Points reference enterprises by id only
#     and every report works without them; a warning is logged instead.
from __future__ import annotations

from pathlib import Path

import polars as pl

from pipeline.log import warn
from pipeline.staging.parquet_writer import staging_path

REQUIRED_SOURCES: tuple[str, ...] = ("pontos_captacao",)

OPTIONAL_SOURCES: tuple[str, ...] = ("empreendimentos",)


class CompletudeError(Exception):
    """Raised when a required staging file is missing or empty.

    The message always names the offending source.
    """


def validar_completude(staging_dir: Path) -> None:
    """Assert that all required staging Parquet files exist and have rows.

    Raises:
        CompletudeError: if any required file is absent or has zero rows.
    """
    for source in REQUIRED_SOURCES:
        path = staging_path(staging_dir, source)

        if not path.exists():
            raise CompletudeError(f"Missing staging file: {source}.parquet (expected at {path})")

        if _contar(path) == 0:
            raise CompletudeError(
                f"Empty staging file: {source}.parquet (0 rows). Re-run the export of '{source}'."
            )

    for source in OPTIONAL_SOURCES:
        path = staging_path(staging_dir, source)
        if not path.exists():
            warn(f"optional source '{source}' missing, skipping.")
        elif _contar(path) == 0:
            warn(f"optional source '{source}' is empty.")


def _contar(path: Path) -> int:
    return int(pl.scan_parquet(path).select(pl.len()).collect().item())
