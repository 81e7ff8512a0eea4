from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import MembershipStatus


class Household(Base):
    __tablename__ = "households"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    memberships = relationship(
        "HouseholdMember",
        back_populates="household",
        cascade="all, delete-orphan",
        order_by="[HouseholdMember.created_at, HouseholdMember.id]",
    )
    trips = relationship(
        "Trip", back_populates="household", cascade="all, delete-orphan"
    )

    # Helper methods
    def get_active_members(self):
        """Get all active memberships of this household"""
        return [
            m for m in self.memberships if m.status == MembershipStatus.ACTIVE.value
        ]
