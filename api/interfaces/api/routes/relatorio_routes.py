# api/interfaces/api/routes/relatorio_routes.py
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from api.application.dtos.export_dto import FormatoExport
from api.application.dtos.relatorio_dto import RelatorioDTO
from api.application.services.export_service import ExportService
from api.application.services.relatorio_service import FiltroRelatorio, RelatorioService
from api.domain.ponto.enums import StatusPonto
from api.interfaces.api.dependencies import get_export_service, get_relatorio_service

router = APIRouter()


def get_filtro(
    empreendimento_id: str | None = Query(default=None, max_length=200),
    status: StatusPonto | None = None,
    periodo_inicio: date | None = None,
    periodo_fim: date | None = None,
) -> FiltroRelatorio:
    return FiltroRelatorio(
        empreendimento_id=empreendimento_id or None,
        status=status,
        periodo_inicio=periodo_inicio,
        periodo_fim=periodo_fim,
    )


@router.get("/relatorios", response_model=RelatorioDTO)
def gerar_relatorio(
    filtro: FiltroRelatorio = Depends(get_filtro),  # noqa: B008
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> RelatorioDTO:
    return service.gerar(filtro)


@router.get("/relatorios/export")
def exportar_relatorio(
    formato: FormatoExport = Query(...),
    filtro: FiltroRelatorio = Depends(get_filtro),  # noqa: B008
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    agora = datetime.now()
    relatorio = service.gerar(filtro, agora=agora)
    nome = f"relatorio_{int(agora.timestamp() * 1000)}"

    if formato == "json":
        return Response(
            content=export_service.exportar_json(relatorio),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(relatorio),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={nome}.csv"},
        )
    if formato == "xlsx":
        return Response(
            content=export_service.exportar_xlsx(relatorio),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename={nome}.xlsx"},
        )
    # pdf
    try:
        from api.infrastructure.pdf_generator import gerar_pdf_relatorio

        pdf_bytes = gerar_pdf_relatorio(relatorio)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={nome}.pdf"},
    )
