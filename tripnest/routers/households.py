from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any
from ..database import get_db
from ..services.household_service import HouseholdService
from ..services.context import RequestContext
from ..schemas.household import (
    HouseholdCreate,
    HouseholdUpdate,
    HouseholdResponse,
    HouseholdInvitation,
    InviteAccept,
)
from ..schemas.household_membership import (
    HouseholdMemberResponse,
    PendingInviteResponse,
    UserHouseholdResponse,
)
from ..dependencies.permissions import get_request_context
from ..utils.router_helpers import handle_service_errors, RouterResponse

router = APIRouter(tags=["households"])


def _household_payload(result: Dict[str, Any]) -> UserHouseholdResponse:
    return UserHouseholdResponse(
        household=HouseholdResponse.model_validate(result["household"]),
        membership=HouseholdMemberResponse.model_validate(result["membership"]),
    )


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_household(
    household_data: HouseholdCreate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Create a new household with current user as owner"""
    household_service = HouseholdService(db)

    result = household_service.create_household(ctx, household_data)

    return RouterResponse.created(
        data=_household_payload(result), message="Household created successfully"
    )


@router.get("/me", response_model=Dict[str, Any])
@handle_service_errors
async def get_my_household(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Get current user's household, or null when they have none"""
    household_service = HouseholdService(db)

    result = household_service.get_user_household(ctx)

    if result is None:
        return RouterResponse.success(
            data={"household": None, "membership": None}, message="No household"
        )

    return RouterResponse.success(data=_household_payload(result))


@router.put("/me", response_model=Dict[str, Any])
@handle_service_errors
async def update_my_household(
    household_update: HouseholdUpdate,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Rename current user's household (owner only)"""
    household_service = HouseholdService(db)

    household = household_service.update_household(ctx, household_update)

    return RouterResponse.updated(
        data={"household": HouseholdResponse.model_validate(household)},
        message="Household updated successfully",
    )


@router.get("/me/members", response_model=Dict[str, Any])
@handle_service_errors
async def get_my_household_members(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Members and pending invites of the current household"""
    household_service = HouseholdService(db)

    members = [
        HouseholdMemberResponse.model_validate(m)
        for m in household_service.get_household_members(ctx)
    ]

    return RouterResponse.success(
        data={
            "members": members,
            "total_count": len(members),
            "active_count": len([m for m in members if m.status == "active"]),
            "pending_count": len([m for m in members if m.status == "pending"]),
        }
    )


@router.post(
    "/me/invites", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED
)
@handle_service_errors
async def invite_partner(
    invitation: HouseholdInvitation,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Create an invite; the returned token is shared with the partner directly"""
    household_service = HouseholdService(db)

    invite = household_service.invite_partner(ctx, invitation.email)

    return RouterResponse.created(
        data={"invite": HouseholdMemberResponse.model_validate(invite)},
        message=f"Invitation created for {invite.invited_email}",
    )


@router.delete("/me/invites/{invite_id}", response_model=Dict[str, Any])
@handle_service_errors
async def cancel_invite(
    invite_id: int,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Cancel a pending invite; accepted memberships are left untouched"""
    household_service = HouseholdService(db)

    cancelled = household_service.cancel_invite(ctx, invite_id)

    return RouterResponse.success(
        data={"cancelled": cancelled},
        message="Invite cancelled" if cancelled else "No pending invite to cancel",
    )


@router.get("/invites/pending", response_model=Dict[str, Any])
@handle_service_errors
async def get_my_pending_invites(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Pending invites addressed to the current user's e-mail"""
    household_service = HouseholdService(db)

    invites = [
        PendingInviteResponse.model_validate(invite)
        for invite in household_service.list_pending_invites(ctx)
    ]

    return RouterResponse.success(
        data={"invites": invites, "total_count": len(invites)}
    )


@router.post("/join", response_model=Dict[str, Any])
@handle_service_errors
async def join_household_by_invitation(
    join_data: InviteAccept,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Join a household using an invite code"""
    household_service = HouseholdService(db)

    membership = household_service.accept_invite(ctx, join_data.invite_token)

    return RouterResponse.success(
        data={"membership": HouseholdMemberResponse.model_validate(membership)},
        message="Successfully joined household",
    )

