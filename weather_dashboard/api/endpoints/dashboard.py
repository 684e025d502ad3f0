from fastapi import APIRouter, Depends, Path

from weather_dashboard.api.deps import get_dashboard
from weather_dashboard.schemas.dashboard import DashboardView, SearchRequest
from weather_dashboard.services.dashboard.session import DashboardSession


router = APIRouter()


@router.get("", response_model=DashboardView)
async def current_view(dashboard: DashboardSession = Depends(get_dashboard)):
    return dashboard.view()


@router.post("/landing", response_model=DashboardView)
async def load_landing(dashboard: DashboardSession = Depends(get_dashboard)):
    return await dashboard.load_landing()


@router.post("/cities/{name}", response_model=DashboardView)
async def select_city(
    name: str = Path(..., min_length=1, max_length=120),
    dashboard: DashboardSession = Depends(get_dashboard),
):
    return await dashboard.select_city(name)


@router.post("/search", response_model=DashboardView)
async def search(body: SearchRequest, dashboard: DashboardSession = Depends(get_dashboard)):
    return await dashboard.search(body.query)


@router.post("/back", response_model=DashboardView)
async def back(dashboard: DashboardSession = Depends(get_dashboard)):
    return await dashboard.back()
