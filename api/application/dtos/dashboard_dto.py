# api/application/dtos/dashboard_dto.py
from pydantic import BaseModel


class GraficoItemDTO(BaseModel):
    nome: str
    faturado: str
    lucro: str


class DashboardDTO(BaseModel):
    total_faturado: str
    total_repassado: str
    lucro_total: str
    pontos_ativos: int
    vencendo_30_dias: int
    grafico: list[GraficoItemDTO]
