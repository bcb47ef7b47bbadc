# pipeline/staging/parquet_writer.py
#
# Staging Parquet read/write, addressed by source name.
#
# Design decisions:
#   - Callers pass (staging_dir, nome) instead of full paths so the
#     "<nome>.parquet" naming lives in one place. completude.py and
#     build_duckdb.py rely on the same convention.
#   - Parent directories are created on write.
#   - No schema enforcement: that is validate's job.
from __future__ import annotations

from pathlib import Path

import polars as pl


def staging_path(staging_dir: Path, nome: str) -> Path:
    return staging_dir / f"{nome}.parquet"


def write_staging(df: pl.DataFrame, staging_dir: Path, nome: str) -> Path:
    """Persist ``df`` as ``staging_dir/<nome>.parquet`` and return the path."""
    path = staging_path(staging_dir, nome)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path


def read_staging(staging_dir: Path, nome: str) -> pl.DataFrame:
    """Raises FileNotFoundError (from Polars) if the file does not exist."""
    return pl.read_parquet(staging_path(staging_dir, nome))
