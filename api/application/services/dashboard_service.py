# api/application/services/dashboard_service.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from api.domain.ponto.repository import PontoRepository

from ..dtos.dashboard_dto import DashboardDTO, GraficoItemDTO

_GRAFICO_MAX_PONTOS = 5
_GRAFICO_NOME_MAX = 10


class DashboardService:
    def __init__(self, ponto_repo: PontoRepository, janela_vencimento_dias: int = 30) -> None:
        self._ponto_repo = ponto_repo
        self._janela = janela_vencimento_dias

    def resumo(self, hoje: date | None = None) -> DashboardDTO:
        """Totais consideram apenas pontos ativos; o grafico usa os primeiros 5 pontos."""
        hoje = hoje or date.today()
        pontos = self._ponto_repo.listar()
        ativos = [p for p in pontos if p.ativo]

        faturado = sum((p.valor_fechado for p in ativos), Decimal("0"))
        repassado = sum((p.valor_repassado for p in ativos), Decimal("0"))

        return DashboardDTO(
            total_faturado=str(faturado),
            total_repassado=str(repassado),
            lucro_total=str(faturado - repassado),
            pontos_ativos=len(ativos),
            vencendo_30_dias=sum(1 for p in ativos if p.vence_em(hoje, self._janela)),
            grafico=[
                GraficoItemDTO(
                    nome=p.nome_ponto[:_GRAFICO_NOME_MAX],
                    faturado=str(p.valor_fechado),
                    lucro=str(p.margem_lucro),
                )
                for p in pontos[:_GRAFICO_MAX_PONTOS]
            ],
        )
