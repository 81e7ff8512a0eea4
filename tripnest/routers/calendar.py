from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from typing import Dict, Any, Optional
from datetime import date
from ..database import get_db
from ..services.calendar_service import CalendarService
from ..services.context import RequestContext
from ..schemas.calendar import CalendarMonth, YearlyStats
from ..schemas.trip import TripResponse
from ..dependencies.permissions import get_request_context
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..utils.constants import AppConstants

router = APIRouter(tags=["calendar"])


@router.get("", response_model=Dict[str, Any])
@handle_service_errors
async def get_calendar_month(
    year: Optional[int] = Query(
        None, ge=AppConstants.CALENDAR_MIN_YEAR, le=AppConstants.CALENDAR_MAX_YEAR
    ),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Monday-first month grid; defaults to the current month"""
    today = date.today()
    calendar_service = CalendarService(db)

    result = calendar_service.get_month(
        ctx, year or today.year, month or today.month, today=today
    )

    return RouterResponse.success(data={"calendar": CalendarMonth(**result)})


@router.get("/stats/{year}", response_model=Dict[str, Any])
@handle_service_errors
async def get_yearly_stats(
    year: int = Path(
        ..., ge=AppConstants.CALENDAR_MIN_YEAR, le=AppConstants.CALENDAR_MAX_YEAR
    ),
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Trips started in ``year`` and their combined spending"""
    calendar_service = CalendarService(db)

    stats = calendar_service.get_yearly_stats(ctx, year)
    stats["trips"] = [TripResponse.model_validate(t) for t in stats["trips"]]

    return RouterResponse.success(data={"stats": YearlyStats(**stats)})
