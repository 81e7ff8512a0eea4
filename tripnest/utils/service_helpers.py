from sqlalchemy.orm import Session
from sqlalchemy import and_
from ..models.household_membership import HouseholdMember
from ..models.enums import MembershipStatus
from .constants import AppConstants
from typing import Any, Dict, Iterable, List
from decimal import Decimal, ROUND_HALF_UP


class ServiceHelpers:
    @staticmethod
    def check_household_membership(
        db: Session, user_id: int, household_id: int
    ) -> bool:
        """Shared permission check"""
        return (
            db.query(HouseholdMember)
            .filter(
                and_(
                    HouseholdMember.user_id == user_id,
                    HouseholdMember.household_id == household_id,
                    HouseholdMember.status == MembershipStatus.ACTIVE.value,
                )
            )
            .first()
            is not None
        )


def round_currency(amount) -> float:
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def checklist_progress(checked: int, total: int) -> int:
    """Completion percentage rounded half-up, 0 for an empty checklist"""
    if total <= 0:
        return 0
    percentage = Decimal(checked) * 100 / Decimal(total)
    return int(percentage.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_expenses_by_date(expenses: Iterable[Any]) -> List[Dict[str, Any]]:
    """Group expenses on their literal date, newest date first.

    Expenses keep their original relative order inside a group.
    """
    groups: Dict[str, List[Any]] = {}
    for expense in expenses:
        groups.setdefault(str(expense.date), []).append(expense)

    return [
        {
            "date": date_key,
            "expenses": groups[date_key],
            "total": round_currency(sum(Decimal(str(e.amount)) for e in groups[date_key])),
        }
        for date_key in sorted(groups, reverse=True)
    ]


def totals_by_category(expenses: Iterable[Any]) -> Dict[str, float]:
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, Decimal("0")) + Decimal(
            str(expense.amount)
        )
    return {category: round_currency(total) for category, total in totals.items()}


def summarize_expenses(expenses: List[Any]) -> Dict[str, Any]:
    """Count, total and display currency for a list of expenses"""
    total = sum((Decimal(str(e.amount)) for e in expenses), Decimal("0"))
    return {
        "count": len(expenses),
        "total": round_currency(total),
        "currency": (
            expenses[0].currency if expenses else AppConstants.DEFAULT_SUMMARY_CURRENCY
        ),
    }
