# api/interfaces/api/routes/dashboard_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.dashboard_dto import DashboardDTO
from api.application.services.dashboard_service import DashboardService
from api.interfaces.api.dependencies import get_dashboard_service

router = APIRouter()


@router.get("/dashboard", response_model=DashboardDTO)
def get_dashboard(
    service: DashboardService = Depends(get_dashboard_service),  # noqa: B008
) -> DashboardDTO:
    return service.resumo()
