from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..services.household_service import HouseholdService
from ..services.context import RequestContext
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..dependencies.permissions import get_request_context

router = APIRouter(tags=["authentication"])


@router.get("/me", response_model=dict)
@handle_service_errors
async def get_me(
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
):
    """Current user as mirrored from Supabase Auth, with their household"""
    result = HouseholdService(db).get_user_household(ctx)

    household = None
    if result is not None:
        household = {
            "id": result["household"].id,
            "name": result["household"].name,
            "role": result["membership"].role,
        }

    return RouterResponse.success(
        data={"user": ctx.user.to_dict(), "household": household}
    )
