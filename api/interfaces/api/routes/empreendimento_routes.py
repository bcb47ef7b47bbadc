# api/interfaces/api/routes/empreendimento_routes.py
from fastapi import APIRouter, Depends, HTTPException

from api.application.dtos.empreendimento_dto import EmpreendimentoDTO
from api.domain.empreendimento.entities import Empreendimento
from api.infrastructure.repositories.duckdb_empreendimento_repo import DuckDBEmpreendimentoRepo
from api.interfaces.api.dependencies import get_empreendimento_repo

router = APIRouter()


def _to_dto(e: Empreendimento) -> EmpreendimentoDTO:
    return EmpreendimentoDTO(id=e.id, nome=e.nome, responsavel=e.responsavel, observacoes=e.observacoes)


@router.get("/empreendimentos", response_model=list[EmpreendimentoDTO])
def listar_empreendimentos(
    repo: DuckDBEmpreendimentoRepo = Depends(get_empreendimento_repo),  # noqa: B008
) -> list[EmpreendimentoDTO]:
    return [_to_dto(e) for e in repo.listar()]


@router.get("/empreendimentos/{empreendimento_id}", response_model=EmpreendimentoDTO)
def obter_empreendimento(
    empreendimento_id: str,
    repo: DuckDBEmpreendimentoRepo = Depends(get_empreendimento_repo),  # noqa: B008
) -> EmpreendimentoDTO:
    empreendimento = repo.buscar_por_id(empreendimento_id)
    if empreendimento is None:
        raise HTTPException(status_code=404, detail="Empreendimento nao encontrado")
    return _to_dto(empreendimento)
