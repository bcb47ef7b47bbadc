# api/application/dtos/ponto_dto.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from api.domain.ponto.entities import PontoCaptacao


class PontoResumoDTO(BaseModel):
    id: str
    nome_ponto: str
    cnpj: str
    empreendimento_id: str
    responsavel: str
    valor_fechado: str  # Decimal serializado como string
    margem_lucro: str
    data_termino: str
    status: str

    @classmethod
    def de_entidade(cls, p: PontoCaptacao) -> PontoResumoDTO:
        return cls(
            id=p.id,
            nome_ponto=p.nome_ponto,
            cnpj=p.cnpj,
            empreendimento_id=p.empreendimento_id,
            responsavel=p.responsavel,
            valor_fechado=str(p.valor_fechado),
            margem_lucro=str(p.margem_lucro),
            data_termino=p.data_termino.isoformat(),
            status=p.status.value,
        )


class PontoDetalheDTO(BaseModel):
    id: str
    nome_ponto: str
    cnpj: str
    endereco: str
    empreendimento_id: str
    responsavel: str
    valor_real: str
    valor_fechado: str
    percentual: str
    valor_repassado: str
    margem_lucro: str
    data_inicio: str
    tempo_contrato: int
    data_termino: str
    status: str
    criado_em: str | None

    @classmethod
    def de_entidade(cls, p: PontoCaptacao) -> PontoDetalheDTO:
        return cls(
            id=p.id,
            nome_ponto=p.nome_ponto,
            cnpj=p.cnpj,
            endereco=p.endereco,
            empreendimento_id=p.empreendimento_id,
            responsavel=p.responsavel,
            valor_real=str(p.valor_real),
            valor_fechado=str(p.valor_fechado),
            percentual=str(p.percentual),
            valor_repassado=str(p.valor_repassado),
            margem_lucro=str(p.margem_lucro),
            data_inicio=p.data_inicio.isoformat(),
            tempo_contrato=p.tempo_contrato,
            data_termino=p.data_termino.isoformat(),
            status=p.status.value,
            criado_em=p.criado_em.isoformat() if p.criado_em else None,
        )


class TermosContratoDTO(BaseModel):
    """Entradas do formulario. Texto nao numerico e rejeitado aqui (422)."""

    valor_fechado: Decimal = Decimal("0")
    percentual: Decimal = Decimal("0")
    data_inicio: date
    tempo_contrato: int = Field(default=12, ge=-1200, le=1200)  # ate 100 anos


class DerivacaoDTO(BaseModel):
    valor_repassado: str
    margem_lucro: str
    data_termino: str
    valor_fechado_formatado: str
    valor_repassado_formatado: str
    margem_lucro_formatado: str
    data_inicio_formatada: str
    data_termino_formatada: str
