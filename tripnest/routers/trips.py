from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any
from ..database import get_db
from ..services.trip_service import TripService
from ..services.expense_service import ExpenseService
from ..services.checklist_service import ChecklistService
from ..services.context import RequestContext
from ..schemas.trip import TripCreate, TripUpdate, TripResponse, TripDetailResponse
from ..schemas.expense import (
    ExpenseCreate,
    ExpenseResponse,
    ExpenseDateGroup,
    ExpenseSummary,
)
from ..schemas.checklist import ChecklistCreate, ChecklistResponse
from ..schemas.common import ConfigOption
from ..dependencies.permissions import get_request_context
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..utils.constants import CategoryMetadata
from ..models.enums import Currency, ExpenseCategory

router = APIRouter(tags=["trips"])


@router.get("", response_model=Dict[str, Any])
@handle_service_errors
async def get_trips(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Household trips ordered by start date"""
    trip_service = TripService(db)

    trips = [TripResponse.model_validate(t) for t in trip_service.list_trips(ctx)]

    return RouterResponse.success(data={"trips": trips, "total_count": len(trips)})


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_trip(
    trip_data: TripCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    trip_service = TripService(db)

    trip = trip_service.create_trip(ctx, trip_data)

    return RouterResponse.created(
        data={"trip": TripResponse.model_validate(trip)},
        message="Trip created successfully",
    )


@router.get("/{trip_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Trip with its expenses, checklists and spending summary"""
    trip_service = TripService(db)

    trip = trip_service.get_trip(ctx, trip_id)

    return RouterResponse.success(data={"trip": TripDetailResponse.model_validate(trip)})


@router.put("/{trip_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_trip(
    trip_id: int,
    trip_update: TripUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    trip_service = TripService(db)

    trip = trip_service.update_trip(ctx, trip_id, trip_update)

    return RouterResponse.updated(
        data={"trip": TripResponse.model_validate(trip)},
        message="Trip updated successfully",
    )


@router.delete("/{trip_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_trip(
    trip_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Delete a trip along with its expenses and checklists"""
    trip_service = TripService(db)

    trip_service.delete_trip(ctx, trip_id)

    return RouterResponse.deleted(message="Trip deleted successfully")


# === TRIP EXPENSES ===


@router.get("/{trip_id}/expenses", response_model=Dict[str, Any])
@handle_service_errors
async def get_trip_expenses(
    trip_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Trip expenses grouped by day, newest day first"""
    expense_service = ExpenseService(db)

    overview = expense_service.get_trip_expense_overview(ctx, trip_id)

    groups = [
        ExpenseDateGroup(
            date=group["date"],
            expenses=[ExpenseResponse.model_validate(e) for e in group["expenses"]],
            total=group["total"],
        )
        for group in overview["groups"]
    ]

    return RouterResponse.success(
        data={
            "trip_id": trip_id,
            "groups": groups,
            "summary": ExpenseSummary(**overview["summary"]),
        }
    )


@router.post(
    "/{trip_id}/expenses",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_trip_expense(
    trip_id: int,
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    expense_service = ExpenseService(db)

    expense = expense_service.create_expense(ctx, trip_id, expense_data)

    return RouterResponse.created(
        data={"expense": ExpenseResponse.model_validate(expense)},
        message="Expense added successfully",
    )


# === TRIP CHECKLISTS ===


@router.get("/{trip_id}/checklists", response_model=Dict[str, Any])
@handle_service_errors
async def get_trip_checklists(
    trip_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    trip_service = TripService(db)

    trip = trip_service.get_trip(ctx, trip_id)
    checklists = [ChecklistResponse.model_validate(c) for c in trip.checklists]

    return RouterResponse.success(
        data={"checklists": checklists, "total_count": len(checklists)}
    )


@router.post(
    "/{trip_id}/checklists",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def create_trip_checklist(
    trip_id: int,
    checklist_data: ChecklistCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    checklist_service = ChecklistService(db)

    checklist = checklist_service.create_checklist(ctx, trip_id, checklist_data)

    return RouterResponse.created(
        data={"checklist": ChecklistResponse.model_validate(checklist)},
        message="Checklist created successfully",
    )


# === CONFIGURATION ENDPOINTS ===


@router.get("/config/categories", response_model=Dict[str, Any])
async def get_expense_categories():
    """Get available expense categories"""
    categories = [
        ConfigOption(
            value=category.value,
            label=CategoryMetadata.EXPENSE_CATEGORIES[category.value]["label"],
            emoji=CategoryMetadata.EXPENSE_CATEGORIES[category.value]["emoji"],
        )
        for category in ExpenseCategory
    ]

    return RouterResponse.success(data={"categories": categories})


@router.get("/config/currencies", response_model=Dict[str, Any])
async def get_currencies():
    """Get supported currencies"""
    currencies = [
        ConfigOption(
            value=currency.value, label=CategoryMetadata.CURRENCIES[currency.value]
        )
        for currency in Currency
    ]

    return RouterResponse.success(data={"currencies": currencies})
