from dataclasses import dataclass
from typing import Optional
from sqlalchemy.orm import Session
from ..models.user import User
from ..models.household_membership import HouseholdMember
from ..models.enums import MembershipStatus


@dataclass
class RequestContext:
    """Identity of the caller, passed explicitly into every service call."""

    user: Optional[User]
    membership: Optional[HouseholdMember] = None

    @property
    def user_id(self) -> Optional[int]:
        return self.user.id if self.user else None

    @property
    def household_id(self) -> Optional[int]:
        return self.membership.household_id if self.membership else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @classmethod
    def for_user(cls, db: Session, user: Optional[User]) -> "RequestContext":
        """Build a context with the user's active membership preloaded"""
        if user is None:
            return cls(user=None)

        membership = (
            db.query(HouseholdMember)
            .filter(
                HouseholdMember.user_id == user.id,
                HouseholdMember.status == MembershipStatus.ACTIVE.value,
            )
            .first()
        )
        return cls(user=user, membership=membership)
