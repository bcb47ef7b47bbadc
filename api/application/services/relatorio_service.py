# api/application/services/relatorio_service.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from api.domain.ponto.entities import PontoCaptacao
from api.domain.ponto.enums import StatusPonto
from api.domain.ponto.repository import PontoRepository

from ..dtos.relatorio_dto import RelatorioDTO, RelatorioLinhaDTO, TotaisRelatorioDTO


@dataclass(frozen=True)
class FiltroRelatorio:
    """Filtro vazio (None) casa com tudo. Periodo e inclusivo e aplicado a data_inicio."""

    empreendimento_id: str | None = None
    status: StatusPonto | None = None
    periodo_inicio: date | None = None
    periodo_fim: date | None = None

    def aceita(self, p: PontoCaptacao) -> bool:
        if self.empreendimento_id and p.empreendimento_id != self.empreendimento_id:
            return False
        if self.status is not None and p.status is not self.status:
            return False
        if self.periodo_inicio is not None and p.data_inicio < self.periodo_inicio:
            return False
        return not (self.periodo_fim is not None and p.data_inicio > self.periodo_fim)


class RelatorioService:
    def __init__(self, ponto_repo: PontoRepository) -> None:
        self._ponto_repo = ponto_repo

    def filtrar(self, filtro: FiltroRelatorio) -> list[PontoCaptacao]:
        return [p for p in self._ponto_repo.listar() if filtro.aceita(p)]

    def gerar(self, filtro: FiltroRelatorio, agora: datetime | None = None) -> RelatorioDTO:
        pontos = self.filtrar(filtro)
        faturado = sum((p.valor_fechado for p in pontos), Decimal("0"))
        repassado = sum((p.valor_repassado for p in pontos), Decimal("0"))
        lucro = sum((p.margem_lucro for p in pontos), Decimal("0"))
        return RelatorioDTO(
            linhas=[
                RelatorioLinhaDTO(
                    id=p.id,
                    nome_ponto=p.nome_ponto,
                    cnpj=p.cnpj,
                    responsavel=p.responsavel,
                    empreendimento_id=p.empreendimento_id,
                    data_inicio=p.data_inicio.isoformat(),
                    data_termino=p.data_termino.isoformat(),
                    valor_fechado=str(p.valor_fechado),
                    valor_repassado=str(p.valor_repassado),
                    margem_lucro=str(p.margem_lucro),
                    status=p.status.value,
                )
                for p in pontos
            ],
            totais=TotaisRelatorioDTO(faturado=str(faturado), repassado=str(repassado), lucro=str(lucro)),
            gerado_em=(agora or datetime.now()).isoformat(timespec="seconds"),
        )
