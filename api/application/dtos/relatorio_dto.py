# api/application/dtos/relatorio_dto.py
from pydantic import BaseModel


class RelatorioLinhaDTO(BaseModel):
    id: str
    nome_ponto: str
    cnpj: str
    responsavel: str
    empreendimento_id: str
    data_inicio: str
    data_termino: str
    valor_fechado: str
    valor_repassado: str
    margem_lucro: str
    status: str


class TotaisRelatorioDTO(BaseModel):
    faturado: str
    repassado: str
    lucro: str


class RelatorioDTO(BaseModel):
    linhas: list[RelatorioLinhaDTO]
    totais: TotaisRelatorioDTO
    gerado_em: str
