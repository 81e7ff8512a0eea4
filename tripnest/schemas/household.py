from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


class HouseholdBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Household name cannot be empty")
        return v.strip()


class HouseholdCreate(HouseholdBase):
    pass


class HouseholdUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class HouseholdResponse(HouseholdBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HouseholdInvitation(BaseModel):
    email: EmailStr


class InviteAccept(BaseModel):
    invite_token: str = Field(..., min_length=1, max_length=200)

    @field_validator("invite_token")
    @classmethod
    def strip_token(cls, v):
        if not v.strip():
            raise ValueError("Invite code cannot be empty")
        return v.strip()
