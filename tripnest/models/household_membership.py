import uuid

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func
from ..database import Base
from .enums import HouseholdRole, MembershipStatus


def generate_invite_token() -> str:
    return uuid.uuid4().hex


class HouseholdMember(Base):
    """A user's (or an invited e-mail's) relationship to a household.

    Rows start either as ``pending`` invites with no user attached, or directly as
    ``active`` for the owner who created the household. A pending row becomes active
    exactly once, when its invite token is redeemed; ``user_id`` is frozen from then on.
    """

    __tablename__ = "household_members"

    id = Column(Integer, primary_key=True, index=True)

    household_id = Column(
        Integer, ForeignKey("households.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )

    role = Column(String, nullable=False, default=HouseholdRole.MEMBER.value)
    invited_email = Column(String, nullable=True)
    invite_token = Column(
        String, nullable=False, unique=True, default=generate_invite_token
    )
    status = Column(String, nullable=False, default=MembershipStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="household_memberships")
    household = relationship("Household", back_populates="memberships")

    __table_args__ = (
        Index("idx_member_user_status", "user_id", "status"),
        Index("idx_member_invited_email", "invited_email"),
        # At most one active household per user
        Index(
            "uq_member_active_user",
            "user_id",
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
    )

    @property
    def is_active(self) -> bool:
        return self.status == MembershipStatus.ACTIVE.value

    @validates("user_id")
    def validate_user_id(self, key, value):
        if self.is_active and self.user_id is not None and value != self.user_id:
            raise ValueError("user_id of an active membership cannot change")
        return value
