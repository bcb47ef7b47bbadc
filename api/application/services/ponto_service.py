# api/application/services/ponto_service.py
from __future__ import annotations

from api.domain.ponto.derivacao import derivar_campos
from api.domain.ponto.formatacao import formatar_data, formatar_moeda
from api.domain.ponto.repository import PontoRepository
from api.domain.ponto.value_objects import TermosContrato

from ..dtos.ponto_dto import DerivacaoDTO, PontoDetalheDTO, PontoResumoDTO, TermosContratoDTO


class PontoService:
    def __init__(self, ponto_repo: PontoRepository) -> None:
        self._ponto_repo = ponto_repo

    def listar(self, query: str | None = None) -> list[PontoResumoDTO]:
        if query:
            pontos = self._ponto_repo.buscar_por_nome_ou_cnpj(query)
        else:
            pontos = self._ponto_repo.listar()
        return [PontoResumoDTO.de_entidade(p) for p in pontos]

    def obter(self, ponto_id: str) -> PontoDetalheDTO | None:
        ponto = self._ponto_repo.buscar_por_id(ponto_id)
        return PontoDetalheDTO.de_entidade(ponto) if ponto else None


def derivar(dto: TermosContratoDTO) -> DerivacaoDTO:
    """Passo de derivacao do formulario: chamado apos cada alteracao de entrada."""
    termos = TermosContrato(
        valor_fechado=dto.valor_fechado,
        percentual=dto.percentual,
        data_inicio=dto.data_inicio,
        tempo_contrato=dto.tempo_contrato,
    )
    derivados = derivar_campos(termos)
    return DerivacaoDTO(
        valor_repassado=str(derivados.valor_repassado),
        margem_lucro=str(derivados.margem_lucro),
        data_termino=derivados.data_termino.isoformat(),
        valor_fechado_formatado=formatar_moeda(termos.valor_fechado),
        valor_repassado_formatado=formatar_moeda(derivados.valor_repassado),
        margem_lucro_formatado=formatar_moeda(derivados.margem_lucro),
        data_inicio_formatada=formatar_data(termos.data_inicio),
        data_termino_formatada=formatar_data(derivados.data_termino),
    )
