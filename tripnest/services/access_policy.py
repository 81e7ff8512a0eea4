from abc import ABC, abstractmethod
from typing import Optional
from sqlalchemy import and_
from sqlalchemy.orm import Session
from ..models.user import User
from ..models.household_membership import HouseholdMember
from ..models.enums import HouseholdRole, MembershipStatus
from ..utils.constants import Messages
from .context import RequestContext
from .errors import (
    BusinessRuleViolationError,
    NotAuthenticatedError,
    PermissionDeniedError,
)


class NoHouseholdError(BusinessRuleViolationError):
    """Caller has no active household"""

    pass


class AccessPolicy(ABC):
    """Authorization checks consulted by services before every operation.

    Implementations only decide where membership facts come from; the
    rules themselves are shared.
    """

    @abstractmethod
    def get_active_membership(self, user_id: int) -> Optional[HouseholdMember]:
        """Return the user's single active membership, if any"""

    def ensure_authenticated(self, ctx: RequestContext) -> User:
        if ctx is None or not ctx.is_authenticated:
            raise NotAuthenticatedError(Messages.NOT_AUTHENTICATED)
        return ctx.user

    def ensure_member(self, ctx: RequestContext) -> HouseholdMember:
        """Require an active membership and refresh it on the context"""
        user = self.ensure_authenticated(ctx)
        membership = self.get_active_membership(user.id)
        if membership is None:
            raise NoHouseholdError(Messages.NO_HOUSEHOLD)

        ctx.membership = membership
        return membership

    def ensure_owner(self, ctx: RequestContext) -> HouseholdMember:
        membership = self.ensure_member(ctx)
        if membership.role != HouseholdRole.OWNER.value:
            raise PermissionDeniedError("Only the household owner can do this")
        return membership

    def ensure_no_active_membership(self, ctx: RequestContext) -> User:
        """Single active household per user"""
        user = self.ensure_authenticated(ctx)
        if self.get_active_membership(user.id) is not None:
            raise BusinessRuleViolationError(Messages.ALREADY_IN_HOUSEHOLD)
        return user


class HouseholdAccessPolicy(AccessPolicy):
    """Membership facts read from the household_members table"""

    def __init__(self, db: Session):
        self.db = db

    def get_active_membership(self, user_id: int) -> Optional[HouseholdMember]:
        return (
            self.db.query(HouseholdMember)
            .filter(
                and_(
                    HouseholdMember.user_id == user_id,
                    HouseholdMember.status == MembershipStatus.ACTIVE.value,
                )
            )
            .first()
        )
