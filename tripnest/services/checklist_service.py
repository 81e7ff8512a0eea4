from sqlalchemy.orm import Session
from sqlalchemy import and_
import logging
from ..models.checklist import Checklist, ChecklistItem
from ..models.trip import Trip
from ..schemas.checklist import (
    ChecklistCreate,
    ChecklistUpdate,
    ChecklistItemCreate,
    ChecklistItemUpdate,
)
from .access_policy import AccessPolicy, HouseholdAccessPolicy
from .context import RequestContext
from .errors import BusinessRuleViolationError, NotFoundError, ServiceError
from .trip_service import TripService

logger = logging.getLogger(__name__)


class ChecklistServiceError(ServiceError):
    """Base exception for checklist service errors"""

    pass


class ChecklistNotFoundError(ChecklistServiceError, NotFoundError):
    pass


class ChecklistItemNotFoundError(ChecklistServiceError, NotFoundError):
    pass


class ChecklistService:
    def __init__(self, db: Session, policy: AccessPolicy = None):
        self.db = db
        self.policy = policy or HouseholdAccessPolicy(db)
        self.trip_service = TripService(db, self.policy)

    def create_checklist(
        self, ctx: RequestContext, trip_id: int, checklist_data: ChecklistCreate
    ) -> Checklist:
        membership = self.policy.ensure_member(ctx)
        self.trip_service.get_household_trip_or_raise(membership.household_id, trip_id)

        try:
            checklist = Checklist(name=checklist_data.name, trip_id=trip_id)

            self.db.add(checklist)
            self.db.commit()
            self.db.refresh(checklist)
            return checklist

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to create checklist: {str(e)}")

    def rename_checklist(
        self, ctx: RequestContext, checklist_id: int, checklist_data: ChecklistUpdate
    ) -> Checklist:
        membership = self.policy.ensure_member(ctx)
        checklist = self._get_checklist_or_raise(membership.household_id, checklist_id)

        try:
            checklist.name = checklist_data.name
            self.db.commit()
            self.db.refresh(checklist)
            return checklist

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to update checklist: {str(e)}")

    def delete_checklist(self, ctx: RequestContext, checklist_id: int) -> None:
        """Delete a checklist and all of its items"""
        membership = self.policy.ensure_member(ctx)
        checklist = self._get_checklist_or_raise(membership.household_id, checklist_id)

        try:
            self.db.delete(checklist)
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to delete checklist: {str(e)}")

    def add_item(
        self, ctx: RequestContext, checklist_id: int, item_data: ChecklistItemCreate
    ) -> ChecklistItem:
        membership = self.policy.ensure_member(ctx)
        self._get_checklist_or_raise(membership.household_id, checklist_id)

        try:
            item = ChecklistItem(
                text=item_data.text, checked=False, checklist_id=checklist_id
            )

            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
            return item

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to add checklist item: {str(e)}")

    def toggle_item(
        self, ctx: RequestContext, item_id: int, checked: bool
    ) -> ChecklistItem:
        return self.update_item(ctx, item_id, ChecklistItemUpdate(checked=checked))

    def update_item(
        self, ctx: RequestContext, item_id: int, item_update: ChecklistItemUpdate
    ) -> ChecklistItem:
        membership = self.policy.ensure_member(ctx)
        item = self._get_item_or_raise(membership.household_id, item_id)

        update_data = item_update.model_dump(exclude_unset=True)
        if "text" in update_data and not (update_data["text"] or "").strip():
            raise BusinessRuleViolationError("Item text cannot be empty")
        if "checked" in update_data and update_data["checked"] is None:
            raise BusinessRuleViolationError("checked cannot be empty")

        try:
            for field, value in update_data.items():
                setattr(item, field, value.strip() if field == "text" else value)

            self.db.commit()
            self.db.refresh(item)
            return item

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to update checklist item: {str(e)}")

    def delete_item(self, ctx: RequestContext, item_id: int) -> None:
        membership = self.policy.ensure_member(ctx)
        item = self._get_item_or_raise(membership.household_id, item_id)

        try:
            self.db.delete(item)
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise ChecklistServiceError(f"Failed to delete checklist item: {str(e)}")

    # === PRIVATE HELPER METHODS ===

    def _get_checklist_or_raise(self, household_id: int, checklist_id: int) -> Checklist:
        checklist = (
            self.db.query(Checklist)
            .join(Trip, Checklist.trip_id == Trip.id)
            .filter(
                and_(Checklist.id == checklist_id, Trip.household_id == household_id)
            )
            .first()
        )
        if not checklist:
            raise ChecklistNotFoundError(f"Checklist {checklist_id} not found")
        return checklist

    def _get_item_or_raise(self, household_id: int, item_id: int) -> ChecklistItem:
        item = (
            self.db.query(ChecklistItem)
            .join(Checklist, ChecklistItem.checklist_id == Checklist.id)
            .join(Trip, Checklist.trip_id == Trip.id)
            .filter(and_(ChecklistItem.id == item_id, Trip.household_id == household_id))
            .first()
        )
        if not item:
            raise ChecklistItemNotFoundError(f"Checklist item {item_id} not found")
        return item
