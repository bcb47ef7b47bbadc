# api/interfaces/api/routes/ponto_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.ponto_dto import DerivacaoDTO, PontoDetalheDTO, PontoResumoDTO, TermosContratoDTO
from api.application.services.ponto_service import PontoService, derivar
from api.interfaces.api.dependencies import get_ponto_service

router = APIRouter()


@router.get("/pontos", response_model=list[PontoResumoDTO])
def listar_pontos(
    q: str | None = Query(default=None, max_length=200),
    service: PontoService = Depends(get_ponto_service),  # noqa: B008
) -> list[PontoResumoDTO]:
    return service.listar(q)


@router.post("/pontos/derivar", response_model=DerivacaoDTO)
def derivar_campos(termos: TermosContratoDTO) -> DerivacaoDTO:
    try:
        return derivar(termos)
    except (ValueError, OverflowError) as err:
        # data_termino fora do intervalo de datas suportado (anos 1 a 9999)
        raise HTTPException(status_code=422, detail="Data de termino fora do intervalo suportado") from err


@router.get("/pontos/{ponto_id}", response_model=PontoDetalheDTO)
def obter_ponto(
    ponto_id: str,
    service: PontoService = Depends(get_ponto_service),  # noqa: B008
) -> PontoDetalheDTO:
    ponto = service.obter(ponto_id)
    if ponto is None:
        raise HTTPException(status_code=404, detail="Ponto nao encontrado")
    return ponto
