# api/infrastructure/repositories/duckdb_ponto_repo.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import duckdb

from api.domain.ponto.entities import PontoCaptacao
from api.domain.ponto.enums import StatusPonto
from api.domain.ponto.value_objects import TermosContrato

# Derivados gravados no banco sao ignorados na leitura: a entidade recalcula.
_COLUNAS = """
    id, nome_ponto, cnpj, endereco, empreendimento_id, responsavel,
    valor_real, valor_fechado, percentual, data_inicio, tempo_contrato,
    status, criado_em
"""


class DuckDBPontoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar(self) -> list[PontoCaptacao]:
        rows = self._conn.execute(f"""
            SELECT {_COLUNAS}
            FROM fato_ponto_captacao
            ORDER BY criado_em DESC NULLS LAST, id
        """).fetchall()  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def buscar_por_id(self, ponto_id: str) -> PontoCaptacao | None:
        row = self._conn.execute(f"""
            SELECT {_COLUNAS}
            FROM fato_ponto_captacao
            WHERE id = ?
        """, [ponto_id]).fetchone()  # noqa: S608
        return self._hidratar(row) if row else None

    def buscar_por_nome_ou_cnpj(self, query: str) -> list[PontoCaptacao]:
        """Nome sem diferenciar maiusculas; CNPJ por substring literal."""
        rows = self._conn.execute(f"""
            SELECT {_COLUNAS}
            FROM fato_ponto_captacao
            WHERE lower(nome_ponto) LIKE '%' || lower(?) || '%'
               OR contains(coalesce(cnpj, ''), ?)
            ORDER BY criado_em DESC NULLS LAST, id
        """, [query, query]).fetchall()  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> PontoCaptacao:  # type: ignore[type-arg]
        return PontoCaptacao(
            id=str(row[0]),
            nome_ponto=str(row[1]),
            cnpj=str(row[2]) if row[2] else "",
            endereco=str(row[3]) if row[3] else "",
            empreendimento_id=str(row[4]) if row[4] else "",
            responsavel=str(row[5]) if row[5] else "",
            valor_real=Decimal(str(row[6])) if row[6] is not None else Decimal("0"),
            termos=TermosContrato(
                valor_fechado=Decimal(str(row[7])),
                percentual=Decimal(str(row[8])),
                data_inicio=row[9] if isinstance(row[9], date) else date.fromisoformat(str(row[9])),
                tempo_contrato=int(row[10]),
            ),
            status=StatusPonto(str(row[11])),
            criado_em=row[12] if isinstance(row[12], datetime) else None,
        )
