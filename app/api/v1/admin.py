# ============================================================================
# Admin API Endpoints - Analytics
# ============================================================================
"""
Admin analytics endpoints.

Every endpoint returns the standard envelope:
{"success": true, "data": ..., "message": ...}

Failures are rendered by the application exception handler as
{"success": false, "message": ..., "error": <error_code>}.
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_dashboard_service
from app.schemas.responses import ApiResponse
from app.services.admin.dashboard_service import DashboardService
from app.services.analytics.time_windows import resolve_date_range


router = APIRouter(prefix="/admin", tags=["admin"])


def _envelope(data, message: str) -> ApiResponse:
    return ApiResponse(success=True, data=data, message=message)


# ============================================================================
# Dashboard Endpoints
# ============================================================================
@router.get("/dashboard", response_model=ApiResponse)
async def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Get the summary cards for the admin dashboard.

    Returns users, events, referrals, jobs and logins sections computed
    against a single captured "now".
    """
    data = await service.get_dashboard()
    return _envelope(data, "Dashboard analytics retrieved successfully")


@router.get("/users-analytics", response_model=ApiResponse)
async def get_users_analytics(service: DashboardService = Depends(get_dashboard_service)):
    data = await service.get_users_analytics()
    return _envelope(data, "User analytics retrieved successfully")


@router.get("/alumni-analytics", response_model=ApiResponse)
async def get_alumni_analytics(service: DashboardService = Depends(get_dashboard_service)):
    """Alumni batches, departments, career, education and locations"""
    data = await service.get_alumni_analytics()
    return _envelope(data, "Alumni analytics retrieved successfully")


# ============================================================================
# Filtered Analytics Endpoints
# ============================================================================
@router.get("/events-analytics", response_model=ApiResponse)
async def get_events_analytics(
    start_month_year: Optional[str] = Query(None, alias="startMonthYear"),
    end_month_year: Optional[str] = Query(None, alias="endMonthYear"),
    year: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    service: DashboardService = Depends(get_dashboard_service)
):
    """
    Get event analytics, optionally restricted to a date range.

    startMonthYear/endMonthYear (e.g. "Mar-2024") win over year/month.
    """
    date_range = resolve_date_range(year, month, start_month_year, end_month_year)
    data = await service.get_events_analytics(date_range=date_range)
    return _envelope(data, "Event analytics retrieved successfully")


@router.get("/jobs-analytics", response_model=ApiResponse)
async def get_jobs_analytics(
    start_month_year: Optional[str] = Query(None, alias="startMonthYear"),
    end_month_year: Optional[str] = Query(None, alias="endMonthYear"),
    year: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    service: DashboardService = Depends(get_dashboard_service)
):
    date_range = resolve_date_range(year, month, start_month_year, end_month_year)
    data = await service.get_jobs_analytics(date_range=date_range)
    return _envelope(data, "Job analytics retrieved successfully")


@router.get("/referrals-analytics", response_model=ApiResponse)
async def get_referrals_analytics(service: DashboardService = Depends(get_dashboard_service)):
    data = await service.get_referrals_analytics()
    return _envelope(data, "Referral analytics retrieved successfully")


@router.get("/contacts-analytics", response_model=ApiResponse)
async def get_contacts_analytics(service: DashboardService = Depends(get_dashboard_service)):
    data = await service.get_contacts_analytics()
    return _envelope(data, "Contact analytics retrieved successfully")
