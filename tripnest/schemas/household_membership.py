from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from ..models.enums import HouseholdRole, MembershipStatus
from .household import HouseholdResponse


class HouseholdMemberResponse(BaseModel):
    id: int
    household_id: int
    user_id: Optional[int] = None
    role: HouseholdRole
    invited_email: Optional[str] = None
    invite_token: str
    status: MembershipStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PendingInviteResponse(HouseholdMemberResponse):
    household: HouseholdResponse


class UserHouseholdResponse(BaseModel):
    household: HouseholdResponse
    membership: HouseholdMemberResponse
