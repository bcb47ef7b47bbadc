# api/interfaces/api/dependencies.py
from api.application.services.dashboard_service import DashboardService
from api.application.services.export_service import ExportService
from api.application.services.ponto_service import PontoService
from api.application.services.relatorio_service import RelatorioService
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_empreendimento_repo import DuckDBEmpreendimentoRepo
from api.infrastructure.repositories.duckdb_ponto_repo import DuckDBPontoRepo


def get_ponto_service() -> PontoService:
    return PontoService(ponto_repo=DuckDBPontoRepo(get_connection()))


def get_dashboard_service() -> DashboardService:
    return DashboardService(
        ponto_repo=DuckDBPontoRepo(get_connection()),
        janela_vencimento_dias=get_settings().vencimento_janela_dias,
    )


def get_relatorio_service() -> RelatorioService:
    return RelatorioService(ponto_repo=DuckDBPontoRepo(get_connection()))


def get_export_service() -> ExportService:
    return ExportService()


def get_empreendimento_repo() -> DuckDBEmpreendimentoRepo:
    return DuckDBEmpreendimentoRepo(get_connection())
