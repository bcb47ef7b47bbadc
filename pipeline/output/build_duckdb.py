# pipeline/output/build_duckdb.py
#
# Atomic DuckDB build: staging Parquet files -> final .duckdb served by the API.
#
# Design decisions:
#   - Written to <output>.tmp.duckdb first and renamed only on success. If
#     anything fails the tmp file is deleted and the previous output stays.
#   - schema.sql is read at build time; it is the single source of truth for
#     the tables and is also loaded by the API when running in-memory.
#   - Staging files are loaded with DuckDB's read_parquet() so rows never
#     round-trip through Python.
#   - Only columns present in both the table and the parquet are inserted.
#     Staging may carry extra columns; missing nullable ones stay NULL.
from __future__ import annotations

from pathlib import Path

import duckdb

from pipeline.log import log
from pipeline.staging.parquet_writer import staging_path

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Staging source name -> DuckDB table. Dimensions before facts.
STAGING_TO_TABLE: dict[str, str] = {
    "empreendimentos": "dim_empreendimento",
    "pontos_captacao": "fato_ponto_captacao",
}


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Build the DuckDB database atomically from staging Parquet files.

    Args:
        staging_dir:  Directory containing staging ``.parquet`` files.
        output_path:  Desired final path for the DuckDB database.

    Returns:
        output_path, after a successful rename.

    Raises:
        Any duckdb or filesystem exception, after deleting the tmp file.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Stale tmp from a crashed run.
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            _load_staging_data(conn, staging_dir)
        finally:
            conn.close()

        tmp_path.replace(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    loaded = 0
    for source, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_path(staging_dir, source)
        if not parquet_path.exists():
            continue

        # table_name comes from STAGING_TO_TABLE and posix_path is a local
        # path built by the pipeline; neither is user input.
        table_cols = [
            row[0]
            for row in conn.execute(
                "SELECT column_name FROM information_schema.columns "
                "WHERE table_name = ? ORDER BY ordinal_position",
                [table_name],
            ).fetchall()
        ]
        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(
                f"SELECT name FROM parquet_schema('{posix_path}')"  # noqa: S608
            ).fetchall()
        }

        shared_cols = [c for c in table_cols if c in parquet_cols]
        if not shared_cols:
            continue

        cols_sql = ", ".join(shared_cols)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {cols_sql} FROM read_parquet('{posix_path}')"
        )
        count = conn.execute(f"SELECT count(*) FROM {table_name}").fetchone()  # noqa: S608
        log(f"  Loaded {source} -> {table_name}: {int(count[0]) if count else 0:,} rows")
        loaded += 1

    log(f"  DuckDB: {loaded} tables loaded")
