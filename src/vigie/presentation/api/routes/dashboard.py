"""
Dashboard API routes.

Provides endpoints for the dashboard:
- GET /dashboard - Current snapshot
- POST /dashboard/refresh - Reload every section
- GET /dashboard/summary - Headline figures
"""

from fastapi import APIRouter, Depends, status

from vigie.application.state.dashboard_state import DashboardState
from vigie.di.dependencies import get_dashboard_state
from vigie.domain.entities.dashboard_summary import summarize_dashboard
from vigie.presentation.schemas.dashboard_schemas import (
    DashboardResponse,
    DashboardSummaryResponse,
)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=DashboardResponse,
    status_code=status.HTTP_200_OK,
    summary="Get dashboard",
    description="Current dashboard snapshot (does not trigger a refresh)",
)
async def get_dashboard(
    state: DashboardState = Depends(get_dashboard_state),
) -> DashboardResponse:
    return DashboardResponse.from_snapshot(state.snapshot)


@router.post(
    "/refresh",
    response_model=DashboardResponse,
    status_code=status.HTTP_200_OK,
    summary="Refresh dashboard",
    description="Reload metrics, transfers, price and historical series",
)
async def refresh_dashboard(
    state: DashboardState = Depends(get_dashboard_state),
) -> DashboardResponse:
    """
    Refresh the dashboard.

    Failures are reported inside the snapshot (status "error" and an
    error message), never as an HTTP error.
    """
    snapshot = await state.refresh()
    return DashboardResponse.from_snapshot(snapshot)


@router.get(
    "/summary",
    response_model=DashboardSummaryResponse,
    status_code=status.HTTP_200_OK,
    summary="Get dashboard summary",
    description="Totals, change percentages, peg stability and distribution",
)
async def get_dashboard_summary(
    state: DashboardState = Depends(get_dashboard_state),
) -> DashboardSummaryResponse:
    summary = summarize_dashboard(state.snapshot)
    return DashboardSummaryResponse.from_summary(summary)
