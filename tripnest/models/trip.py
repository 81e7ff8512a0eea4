from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    notes = Column(Text)

    household_id = Column(
        Integer, ForeignKey("households.id", ondelete="CASCADE"), nullable=False
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    household = relationship("Household", back_populates="trips")
    expenses = relationship(
        "Expense",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="[Expense.date.desc(), Expense.id.desc()]",
    )
    checklists = relationship(
        "Checklist",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="[Checklist.created_at, Checklist.id]",
    )

    __table_args__ = (Index("idx_trip_household_start", "household_id", "start_date"),)
