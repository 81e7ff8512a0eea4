from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError
from typing import List, Dict, Any, Optional
import logging
from ..models.household import Household
from ..models.household_membership import HouseholdMember
from ..models.enums import HouseholdRole, MembershipStatus
from ..schemas.household import HouseholdCreate, HouseholdUpdate
from ..utils.constants import Messages
from ..utils.validation import ValidationHelpers
from .access_policy import AccessPolicy, HouseholdAccessPolicy
from .context import RequestContext
from .errors import BusinessRuleViolationError, NotFoundError, ServiceError

logger = logging.getLogger(__name__)


class HouseholdServiceError(ServiceError):
    """Base exception for household service errors"""

    pass


class HouseholdNotFoundError(HouseholdServiceError, NotFoundError):
    """Household not found"""

    pass


class InviteNotFoundError(HouseholdServiceError, NotFoundError):
    """No pending invite matches the given token"""

    pass


class HouseholdService:
    def __init__(self, db: Session, policy: AccessPolicy = None):
        self.db = db
        self.policy = policy or HouseholdAccessPolicy(db)

    def create_household(
        self, ctx: RequestContext, household_data: HouseholdCreate
    ) -> Dict[str, Any]:
        """Create a new household with the caller as its active owner.

        Household and owner membership are written in one transaction, so a
        failure never leaves a household without members behind.
        """
        creator = self.policy.ensure_no_active_membership(ctx)

        try:
            household = Household(name=household_data.name)

            self.db.add(household)
            self.db.flush()  # Get ID without committing

            membership = self._create_membership(
                household_id=household.id,
                user_id=creator.id,
                role=HouseholdRole.OWNER.value,
                status=MembershipStatus.ACTIVE.value,
            )

            self.db.commit()
            self.db.refresh(household)
            self.db.refresh(membership)

        except IntegrityError:
            self.db.rollback()
            raise BusinessRuleViolationError(Messages.ALREADY_IN_HOUSEHOLD)

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to create household: {str(e)}")

        ctx.membership = membership
        logger.info(f"User {creator.id} created household {household.id}")
        return {"household": household, "membership": membership}

    def get_user_household(self, ctx: RequestContext) -> Optional[Dict[str, Any]]:
        """Get the caller's household, or None when they have not joined one"""
        user = self.policy.ensure_authenticated(ctx)
        membership = self.policy.get_active_membership(user.id)

        if membership is None:
            return None

        ctx.membership = membership
        return {"household": membership.household, "membership": membership}

    def get_household_members(self, ctx: RequestContext) -> List[HouseholdMember]:
        """All memberships of the caller's household, pending invites included"""
        membership = self.policy.ensure_member(ctx)

        return (
            self.db.query(HouseholdMember)
            .filter(HouseholdMember.household_id == membership.household_id)
            .order_by(HouseholdMember.created_at.asc(), HouseholdMember.id.asc())
            .all()
        )

    def update_household(
        self, ctx: RequestContext, household_update: HouseholdUpdate
    ) -> Household:
        """Rename the caller's household (owner only)"""
        membership = self.policy.ensure_owner(ctx)
        household = self._get_household_or_raise(membership.household_id)

        update_data = household_update.model_dump(exclude_unset=True)
        if "name" in update_data and not (update_data["name"] or "").strip():
            raise BusinessRuleViolationError("Household name cannot be empty")

        try:
            for field, value in update_data.items():
                setattr(household, field, value.strip() if field == "name" else value)

            self.db.commit()
            self.db.refresh(household)
            return household

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to update household: {str(e)}")

    # === INVITES ===

    def invite_partner(self, ctx: RequestContext, email: str) -> HouseholdMember:
        """Create a pending membership carrying a fresh invite token"""
        membership = self.policy.ensure_member(ctx)

        email = ValidationHelpers.normalize_email(email or "")
        if not ValidationHelpers.validate_email(email):
            raise BusinessRuleViolationError(f"Invalid email address: {email}")

        try:
            invite = self._create_membership(
                household_id=membership.household_id,
                user_id=None,
                role=HouseholdRole.MEMBER.value,
                status=MembershipStatus.PENDING.value,
                invited_email=email,
            )

            self.db.commit()
            self.db.refresh(invite)

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to create invite: {str(e)}")

        logger.info(
            f"User {ctx.user_id} invited {invite.invited_email} "
            f"to household {invite.household_id}"
        )
        return invite

    def accept_invite(self, ctx: RequestContext, invite_token: str) -> HouseholdMember:
        """Redeem an invite token for the caller.

        The status check and the write are a single conditional UPDATE, so of
        two concurrent redemptions of one token exactly one matches a row.
        """
        user = self.policy.ensure_no_active_membership(ctx)

        try:
            updated = (
                self.db.query(HouseholdMember)
                .filter(
                    and_(
                        HouseholdMember.invite_token == invite_token,
                        HouseholdMember.status == MembershipStatus.PENDING.value,
                    )
                )
                .update(
                    {
                        HouseholdMember.user_id: user.id,
                        HouseholdMember.status: MembershipStatus.ACTIVE.value,
                    },
                    synchronize_session=False,
                )
            )
            self.db.commit()

        except IntegrityError:
            # Another redemption activated a membership for this user first
            self.db.rollback()
            raise BusinessRuleViolationError(Messages.ALREADY_IN_HOUSEHOLD)

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to accept invite: {str(e)}")

        if not updated:
            logger.warning(f"User {user.id} tried to redeem an invalid invite code")
            raise InviteNotFoundError(Messages.INVALID_INVITE_CODE)

        membership = (
            self.db.query(HouseholdMember)
            .filter(HouseholdMember.invite_token == invite_token)
            .first()
        )
        ctx.membership = membership
        logger.info(f"User {user.id} joined household {membership.household_id}")
        return membership

    def cancel_invite(self, ctx: RequestContext, invite_id: int) -> bool:
        """Delete a pending invite of the caller's household.

        Returns False when nothing matched; an accepted membership is never
        removed through this path.
        """
        membership = self.policy.ensure_member(ctx)

        try:
            deleted = (
                self.db.query(HouseholdMember)
                .filter(
                    and_(
                        HouseholdMember.id == invite_id,
                        HouseholdMember.household_id == membership.household_id,
                        HouseholdMember.status == MembershipStatus.PENDING.value,
                    )
                )
                .delete(synchronize_session=False)
            )
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to cancel invite: {str(e)}")

        return deleted > 0

    def list_pending_invites(self, ctx: RequestContext) -> List[HouseholdMember]:
        """Pending invites addressed to the caller's e-mail"""
        user = self.policy.ensure_authenticated(ctx)

        return (
            self.db.query(HouseholdMember)
            .join(Household, HouseholdMember.household_id == Household.id)
            .filter(
                and_(
                    HouseholdMember.status == MembershipStatus.PENDING.value,
                    func.lower(HouseholdMember.invited_email)
                    == ValidationHelpers.normalize_email(user.email),
                )
            )
            .order_by(HouseholdMember.created_at.asc(), HouseholdMember.id.asc())
            .all()
        )

    # === PRIVATE HELPER METHODS ===

    def _get_household_or_raise(self, household_id: int) -> Household:
        household = (
            self.db.query(Household).filter(Household.id == household_id).first()
        )
        if not household:
            raise HouseholdNotFoundError(f"Household {household_id} not found")
        return household

    def _create_membership(
        self,
        household_id: int,
        user_id: Optional[int],
        role: str,
        status: str,
        invited_email: Optional[str] = None,
    ) -> HouseholdMember:
        """Create new membership record"""
        membership = HouseholdMember(
            household_id=household_id,
            user_id=user_id,
            role=role,
            status=status,
            invited_email=invited_email,
        )
        self.db.add(membership)
        return membership
