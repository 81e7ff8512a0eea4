from sqlalchemy import Column, Integer, String, Boolean, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    supabase_id = Column(String, unique=True, index=True, nullable=False)

    is_active = Column(Boolean, default=True)
    email_verified = Column(Boolean, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("supabase_id", name="uq_user_supabase_id"),
        UniqueConstraint("email", name="uq_user_email"),
    )

    household_memberships = relationship("HouseholdMember", back_populates="user")
    paid_expenses = relationship("Expense", back_populates="paid_by_user")

    def get_active_membership(self):
        """Get the user's currently active membership, if any"""
        return next((m for m in self.household_memberships if m.is_active), None)

    @classmethod
    def create_from_supabase(cls, supabase_user, db_session):
        """Create new user from Supabase auth user"""
        user_metadata = supabase_user.user_metadata or {}

        user = cls(
            email=supabase_user.email,
            name=user_metadata.get("full_name")
            or user_metadata.get("name")
            or supabase_user.email.split("@")[0],
            supabase_id=supabase_user.id,
            email_verified=supabase_user.email_confirmed_at is not None,
            is_active=True,
        )

        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    @classmethod
    def get_or_create_from_supabase(cls, supabase_user, db_session):
        """Get existing user or create new one from Supabase"""
        user = db_session.query(cls).filter(cls.supabase_id == supabase_user.id).first()

        if user:
            email_verified = supabase_user.email_confirmed_at is not None
            if user.email_verified != email_verified:
                user.email_verified = email_verified
                db_session.commit()
            return user

        return cls.create_from_supabase(supabase_user, db_session)

    def to_dict(self):
        """Convert user to dictionary for API responses"""
        membership = self.get_active_membership()
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "is_active": self.is_active,
            "email_verified": self.email_verified,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "active_household": membership.household_id if membership else None,
        }
