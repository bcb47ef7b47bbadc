from __future__ import annotations

import os
from collections.abc import Generator
from datetime import date, timedelta
from pathlib import Path

import duckdb
import pytest
from dateutil.relativedelta import relativedelta
from fastapi.testclient import TestClient

SCHEMA_PATH = Path(__file__).parent.parent.parent / "pipeline" / "output" / "schema.sql"

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


def inicio_vencendo() -> date:
    """data_inicio que, com 1 mes de contrato, termina ~10 dias apos hoje."""
    return date.today() + timedelta(days=10) - relativedelta(months=1)


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Cria DuckDB in-memory com schema e dados deterministicos."""
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))

    # --- Empreendimentos ---
    conn.execute("""
        INSERT INTO dim_empreendimento VALUES
        ('e1', 'Grupo Alfa', 'Ana Souza', '', TIMESTAMP '2024-01-10 12:00:00'),
        ('e2', 'Rede Beta', 'Bruno Lima', 'Contrato anual', TIMESTAMP '2024-02-01 09:30:00')
    """)

    # --- Pontos ---
    # p1 carrega derivados desatualizados de proposito: a API deve recalcular.
    conn.execute("""
        INSERT INTO fato_ponto_captacao VALUES
        ('p1', 'Shopping Centro', '11.222.333/0001-81', 'Av. Central, 100', 'e1', 'Carla',
         12000.00, 10000.00, 30, 0, 10000.00, DATE '2025-01-31', 1, DATE '2025-03-03',
         'ativo', TIMESTAMP '2025-01-31 10:00:00'),
        ('p2', 'Aeroporto Norte', '33.000.167/0001-01', 'Rod. Norte, km 5', 'e2', 'Davi',
         0, 5000.00, 50, 2500.00, 2500.00, DATE '2025-06-15', 120, DATE '2035-06-15',
         'ativo', TIMESTAMP '2025-06-15 10:00:00'),
        ('p3', 'Rodoviaria Sul', '12.345.678/0001-95', 'Rua Sul, 9', 'e1', 'Eva',
         0, 2000.00, 120, 2400.00, -400.00, DATE '2024-03-01', 6, DATE '2024-09-01',
         'encerrado', TIMESTAMP '2024-03-01 10:00:00'),
        ('p4', 'Estacao Leste', '', NULL, 'e2', NULL,
         NULL, 1000.00, 10, 100.00, 900.00, ?, 1, ?,
         'ativo', NULL)
    """, [inicio_vencendo(), inicio_vencendo() + relativedelta(months=1)])

    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
