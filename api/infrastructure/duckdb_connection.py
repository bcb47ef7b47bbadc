# api/infrastructure/duckdb_connection.py
from __future__ import annotations

from pathlib import Path

import duckdb

from .config import get_settings

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "pipeline" / "output" / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        path = get_settings().duckdb_path
        if path == ":memory:":
            # Sem arquivo gerado pelo pipeline: sobe com as tabelas vazias.
            _connection = duckdb.connect(path)
            _connection.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        else:
            _connection = duckdb.connect(path, read_only=True)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn
