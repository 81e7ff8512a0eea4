from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, Any
from ..database import get_db
from ..services.expense_service import ExpenseService
from ..services.context import RequestContext
from ..schemas.expense import ExpenseUpdate, ExpenseResponse
from ..dependencies.permissions import get_request_context
from ..utils.router_helpers import handle_service_errors, RouterResponse

router = APIRouter(tags=["expenses"])


@router.put("/{expense_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_expense(
    expense_id: int,
    expense_update: ExpenseUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Update only the fields present in the request body"""
    expense_service = ExpenseService(db)

    expense = expense_service.update_expense(ctx, expense_id, expense_update)

    return RouterResponse.updated(
        data={"expense": ExpenseResponse.model_validate(expense)},
        message="Expense updated successfully",
    )


@router.delete("/{expense_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    expense_service = ExpenseService(db)

    expense_service.delete_expense(ctx, expense_id)

    return RouterResponse.deleted(message="Expense deleted successfully")
