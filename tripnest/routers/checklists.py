from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any
from ..database import get_db
from ..services.checklist_service import ChecklistService
from ..services.context import RequestContext
from ..schemas.checklist import (
    ChecklistUpdate,
    ChecklistResponse,
    ChecklistItemCreate,
    ChecklistItemUpdate,
    ChecklistItemResponse,
)
from ..dependencies.permissions import get_request_context
from ..utils.router_helpers import handle_service_errors, RouterResponse

router = APIRouter(tags=["checklists"])


# Item routes first so "/items/{id}" never reads as a checklist id
@router.put("/items/{item_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_checklist_item(
    item_id: int,
    item_update: ChecklistItemUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Edit item text and/or toggle its checked flag"""
    checklist_service = ChecklistService(db)

    item = checklist_service.update_item(ctx, item_id, item_update)

    return RouterResponse.updated(
        data={"item": ChecklistItemResponse.model_validate(item)},
        message="Item updated successfully",
    )


@router.delete("/items/{item_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_checklist_item(
    item_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    checklist_service = ChecklistService(db)

    checklist_service.delete_item(ctx, item_id)

    return RouterResponse.deleted(message="Item deleted successfully")


@router.put("/{checklist_id}", response_model=Dict[str, Any])
@handle_service_errors
async def rename_checklist(
    checklist_id: int,
    checklist_update: ChecklistUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    checklist_service = ChecklistService(db)

    checklist = checklist_service.rename_checklist(ctx, checklist_id, checklist_update)

    return RouterResponse.updated(
        data={"checklist": ChecklistResponse.model_validate(checklist)},
        message="Checklist updated successfully",
    )


@router.delete("/{checklist_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_checklist(
    checklist_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Delete a checklist and all of its items"""
    checklist_service = ChecklistService(db)

    checklist_service.delete_checklist(ctx, checklist_id)

    return RouterResponse.deleted(message="Checklist deleted successfully")


@router.post(
    "/{checklist_id}/items",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def add_checklist_item(
    checklist_id: int,
    item_data: ChecklistItemCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    checklist_service = ChecklistService(db)

    item = checklist_service.add_item(ctx, checklist_id, item_data)

    return RouterResponse.created(
        data={"item": ChecklistItemResponse.model_validate(item)},
        message="Item added successfully",
    )
