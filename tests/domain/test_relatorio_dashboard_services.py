from datetime import date, datetime
from decimal import Decimal

from api.application.dtos.ponto_dto import TermosContratoDTO
from api.application.services.dashboard_service import DashboardService
from api.application.services.ponto_service import PontoService, derivar
from api.application.services.relatorio_service import FiltroRelatorio, RelatorioService
from api.domain.ponto.entities import PontoCaptacao
from api.domain.ponto.enums import StatusPonto
from api.domain.ponto.value_objects import TermosContrato


class _RepoEmMemoria:
    def __init__(self, pontos: list[PontoCaptacao]) -> None:
        self._pontos = pontos

    def listar(self) -> list[PontoCaptacao]:
        return list(self._pontos)

    def buscar_por_id(self, ponto_id: str) -> PontoCaptacao | None:
        return next((p for p in self._pontos if p.id == ponto_id), None)

    def buscar_por_nome_ou_cnpj(self, query: str) -> list[PontoCaptacao]:
        q = query.lower()
        return [p for p in self._pontos if q in p.nome_ponto.lower() or query in p.cnpj]


def _ponto(
    id: str,  # noqa: A002
    valor: str,
    percentual: str,
    inicio: date,
    meses: int = 12,
    status: StatusPonto = StatusPonto.ATIVO,
    empreendimento_id: str = "e1",
) -> PontoCaptacao:
    return PontoCaptacao(
        id=id,
        nome_ponto=f"Ponto {id} com nome longo",
        cnpj="11222333000181",
        termos=TermosContrato(Decimal(valor), Decimal(percentual), inicio, meses),
        status=status,
        empreendimento_id=empreendimento_id,
    )


PONTOS = [
    _ponto("a", "1000", "10", date(2025, 1, 15)),
    _ponto("b", "2000", "50", date(2025, 6, 1), empreendimento_id="e2"),
    _ponto("c", "500", "200", date(2024, 3, 1), status=StatusPonto.ENCERRADO),
    _ponto("d", "3000", "0", date(2025, 2, 20), meses=1),  # termina 20/03/2025
]


# ---------- RelatorioService ----------


def test_relatorio_sem_filtro_retorna_tudo_e_totais():
    rel = RelatorioService(_RepoEmMemoria(PONTOS)).gerar(FiltroRelatorio(), agora=datetime(2025, 3, 1, 10, 0))
    assert len(rel.linhas) == 4
    assert Decimal(rel.totais.faturado) == Decimal("6500")
    assert Decimal(rel.totais.repassado) == Decimal("2100")
    assert Decimal(rel.totais.lucro) == Decimal("4400")
    assert rel.gerado_em == "2025-03-01T10:00:00"


def test_relatorio_filtra_por_empreendimento():
    rel = RelatorioService(_RepoEmMemoria(PONTOS)).gerar(FiltroRelatorio(empreendimento_id="e2"))
    assert [linha.id for linha in rel.linhas] == ["b"]


def test_relatorio_filtra_por_status():
    rel = RelatorioService(_RepoEmMemoria(PONTOS)).gerar(FiltroRelatorio(status=StatusPonto.ENCERRADO))
    assert [linha.id for linha in rel.linhas] == ["c"]
    assert Decimal(rel.totais.lucro) == Decimal("-500")


def test_relatorio_periodo_inclusivo_sobre_data_inicio():
    filtro = FiltroRelatorio(periodo_inicio=date(2025, 1, 15), periodo_fim=date(2025, 2, 20))
    rel = RelatorioService(_RepoEmMemoria(PONTOS)).gerar(filtro)
    assert sorted(linha.id for linha in rel.linhas) == ["a", "d"]


def test_relatorio_vazio_totais_zerados():
    rel = RelatorioService(_RepoEmMemoria([])).gerar(FiltroRelatorio())
    assert rel.linhas == []
    assert Decimal(rel.totais.faturado) == 0


# ---------- DashboardService ----------


def test_dashboard_considera_apenas_ativos():
    dash = DashboardService(_RepoEmMemoria(PONTOS)).resumo(hoje=date(2025, 3, 1))
    assert dash.pontos_ativos == 3
    assert Decimal(dash.total_faturado) == Decimal("6000")
    assert Decimal(dash.total_repassado) == Decimal("1100")
    assert Decimal(dash.lucro_total) == Decimal("4900")


def test_dashboard_conta_vencendo_em_30_dias():
    dash = DashboardService(_RepoEmMemoria(PONTOS)).resumo(hoje=date(2025, 3, 1))
    assert dash.vencendo_30_dias == 1  # apenas "d"


def test_dashboard_janela_configuravel():
    dash = DashboardService(_RepoEmMemoria(PONTOS), janela_vencimento_dias=5).resumo(hoje=date(2025, 3, 1))
    assert dash.vencendo_30_dias == 0


def test_dashboard_grafico_primeiros_cinco_com_nome_truncado():
    muitos = [_ponto(str(i), "100", "10", date(2025, 1, 1)) for i in range(7)]
    dash = DashboardService(_RepoEmMemoria(muitos)).resumo(hoje=date(2025, 3, 1))
    assert len(dash.grafico) == 5
    assert dash.grafico[0].nome == "Ponto 0 co"
    assert Decimal(dash.grafico[0].lucro) == Decimal("90")


# ---------- PontoService ----------


def test_ponto_service_busca_por_nome_ou_cnpj():
    service = PontoService(_RepoEmMemoria(PONTOS))
    assert len(service.listar("ponto a")) == 1
    assert len(service.listar("11.222")) == 4
    assert len(service.listar()) == 4


def test_ponto_service_obter_inexistente():
    assert PontoService(_RepoEmMemoria(PONTOS)).obter("zzz") is None


def test_derivar_formulario_formata_saida():
    dto = TermosContratoDTO(
        valor_fechado=Decimal("1234.50"),
        percentual=Decimal("10"),
        data_inicio=date(2024, 1, 31),
        tempo_contrato=1,
    )
    out = derivar(dto)
    assert Decimal(out.valor_repassado) == Decimal("123.45")
    assert out.valor_fechado_formatado == "R$ 1.234,50"
    assert out.margem_lucro_formatado == "R$ 1.111,05"
    assert out.data_termino == "2024-02-29"
    assert out.data_termino_formatada == "29/02/2024"
