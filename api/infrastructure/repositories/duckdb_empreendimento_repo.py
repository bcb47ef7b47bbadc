# api/infrastructure/repositories/duckdb_empreendimento_repo.py
from __future__ import annotations

from datetime import datetime

import duckdb

from api.domain.empreendimento.entities import Empreendimento


class DuckDBEmpreendimentoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[Empreendimento]:
        rows = self._conn.execute("""
            SELECT id, nome, responsavel, observacoes, criado_em
            FROM dim_empreendimento
            ORDER BY nome
        """).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, empreendimento_id: str) -> Empreendimento | None:
        row = self._conn.execute("""
            SELECT id, nome, responsavel, observacoes, criado_em
            FROM dim_empreendimento
            WHERE id = ?
        """, [empreendimento_id]).fetchone()
        return self._hidratar(row) if row else None

    def _hidratar(self, row: tuple) -> Empreendimento:  # type: ignore[type-arg]
        return Empreendimento(
            id=str(row[0]),
            nome=str(row[1]),
            responsavel=str(row[2]) if row[2] else "",
            observacoes=str(row[3]) if row[3] else "",
            criado_em=row[4] if isinstance(row[4], datetime) else None,
        )
