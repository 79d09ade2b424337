"""
Dashboard Endpoint
"""
from fastapi import APIRouter, Depends

from workpass.application.services.dashboard import DashboardService
from workpass.domain.entities import User
from workpass.presentation.api.v1.container import get_dashboard_service
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.dashboard import DashboardResponse


router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    dashboard = await service.get_dashboard(user.id)
    return DashboardResponse.from_entity(dashboard)
