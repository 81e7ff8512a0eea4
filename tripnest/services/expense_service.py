from sqlalchemy.orm import Session
from sqlalchemy import and_, desc
from typing import Dict, List, Any, Optional
from decimal import Decimal, ROUND_HALF_UP
import logging
from ..models.expense import Expense
from ..models.trip import Trip
from ..schemas.expense import ExpenseCreate, ExpenseUpdate
from ..utils.service_helpers import (
    ServiceHelpers,
    group_expenses_by_date,
    summarize_expenses,
)
from ..utils.validation import ValidationHelpers
from .access_policy import AccessPolicy, HouseholdAccessPolicy
from .context import RequestContext
from .errors import BusinessRuleViolationError, NotFoundError, ServiceError
from .trip_service import TripService

logger = logging.getLogger(__name__)

REQUIRED_EXPENSE_FIELDS = ("amount", "currency", "category", "date")


class ExpenseServiceError(ServiceError):
    """Base exception for expense service errors"""

    pass


class ExpenseNotFoundError(ExpenseServiceError, NotFoundError):
    """Expense not found"""

    pass


class ExpenseService:
    def __init__(self, db: Session, policy: AccessPolicy = None):
        self.db = db
        self.policy = policy or HouseholdAccessPolicy(db)
        self.trip_service = TripService(db, self.policy)

    def list_trip_expenses(self, ctx: RequestContext, trip_id: int) -> List[Expense]:
        """Expenses of a trip, newest date first"""
        membership = self.policy.ensure_member(ctx)
        self.trip_service.get_household_trip_or_raise(membership.household_id, trip_id)

        return (
            self.db.query(Expense)
            .filter(Expense.trip_id == trip_id)
            .order_by(desc(Expense.date), desc(Expense.id))
            .all()
        )

    def get_trip_expense_overview(
        self, ctx: RequestContext, trip_id: int
    ) -> Dict[str, Any]:
        """Expenses grouped per day along with the trip total"""
        expenses = self.list_trip_expenses(ctx, trip_id)

        return {
            "trip_id": trip_id,
            "groups": group_expenses_by_date(expenses),
            "summary": summarize_expenses(expenses),
        }

    def create_expense(
        self, ctx: RequestContext, trip_id: int, expense_data: ExpenseCreate
    ) -> Expense:
        membership = self.policy.ensure_member(ctx)
        self.trip_service.get_household_trip_or_raise(membership.household_id, trip_id)

        self._validate_amount(expense_data.amount)
        self._validate_paid_by(membership.household_id, expense_data.paid_by)

        try:
            expense = Expense(
                amount=self._quantize(expense_data.amount),
                currency=expense_data.currency.value,
                category=expense_data.category.value,
                description=expense_data.description,
                date=expense_data.date,
                paid_by=expense_data.paid_by,
                trip_id=trip_id,
            )

            self.db.add(expense)
            self.db.commit()
            self.db.refresh(expense)
            return expense

        except Exception as e:
            self.db.rollback()
            raise ExpenseServiceError(f"Failed to create expense: {str(e)}")

    def update_expense(
        self, ctx: RequestContext, expense_id: int, expense_update: ExpenseUpdate
    ) -> Expense:
        """Merge-patch an expense"""
        membership = self.policy.ensure_member(ctx)
        expense = self._get_household_expense_or_raise(
            membership.household_id, expense_id
        )

        update_data = expense_update.model_dump(exclude_unset=True)
        for field in REQUIRED_EXPENSE_FIELDS:
            if field in update_data and update_data[field] is None:
                raise BusinessRuleViolationError(f"{field} cannot be empty")

        if "amount" in update_data:
            self._validate_amount(update_data["amount"])
            update_data["amount"] = self._quantize(update_data["amount"])
        if "paid_by" in update_data:
            self._validate_paid_by(membership.household_id, update_data["paid_by"])
        for field in ("currency", "category"):
            if field in update_data:
                update_data[field] = update_data[field].value

        try:
            for field, value in update_data.items():
                setattr(expense, field, value)

            self.db.commit()
            self.db.refresh(expense)
            return expense

        except Exception as e:
            self.db.rollback()
            raise ExpenseServiceError(f"Failed to update expense: {str(e)}")

    def delete_expense(self, ctx: RequestContext, expense_id: int) -> None:
        membership = self.policy.ensure_member(ctx)
        expense = self._get_household_expense_or_raise(
            membership.household_id, expense_id
        )

        try:
            self.db.delete(expense)
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise ExpenseServiceError(f"Failed to delete expense: {str(e)}")

    # === PRIVATE HELPER METHODS ===

    def _get_household_expense_or_raise(
        self, household_id: int, expense_id: int
    ) -> Expense:
        expense = (
            self.db.query(Expense)
            .join(Trip, Expense.trip_id == Trip.id)
            .filter(and_(Expense.id == expense_id, Trip.household_id == household_id))
            .first()
        )
        if not expense:
            raise ExpenseNotFoundError(f"Expense {expense_id} not found")
        return expense

    def _validate_amount(self, amount) -> None:
        if not ValidationHelpers.validate_amount(amount):
            raise BusinessRuleViolationError(f"Invalid expense amount: {amount}")

    def _validate_paid_by(self, household_id: int, paid_by: Optional[int]) -> None:
        if paid_by is None:
            return
        if not ServiceHelpers.check_household_membership(
            self.db, paid_by, household_id
        ):
            raise BusinessRuleViolationError(
                f"User {paid_by} is not a member of this household"
            )

    @staticmethod
    def _quantize(amount) -> Decimal:
        return Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
