from sqlalchemy.orm import Session
from sqlalchemy import and_
from typing import List
from datetime import date
import logging
from ..models.trip import Trip
from ..schemas.trip import TripCreate, TripUpdate
from ..utils.validation import ValidationHelpers
from .access_policy import AccessPolicy, HouseholdAccessPolicy
from .context import RequestContext
from .errors import BusinessRuleViolationError, NotFoundError, ServiceError

logger = logging.getLogger(__name__)

REQUIRED_TRIP_FIELDS = ("name", "destination", "start_date", "end_date")


class TripServiceError(ServiceError):
    """Base exception for trip service errors"""

    pass


class TripNotFoundError(TripServiceError, NotFoundError):
    """Trip not found"""

    pass


class TripService:
    def __init__(self, db: Session, policy: AccessPolicy = None):
        self.db = db
        self.policy = policy or HouseholdAccessPolicy(db)

    def list_trips(self, ctx: RequestContext) -> List[Trip]:
        """Household trips, soonest first"""
        membership = self.policy.ensure_member(ctx)

        return (
            self.db.query(Trip)
            .filter(Trip.household_id == membership.household_id)
            .order_by(Trip.start_date.asc(), Trip.id.asc())
            .all()
        )

    def get_trip(self, ctx: RequestContext, trip_id: int) -> Trip:
        membership = self.policy.ensure_member(ctx)
        return self.get_household_trip_or_raise(membership.household_id, trip_id)

    def get_trips_starting_between(
        self, ctx: RequestContext, range_start: date, range_end: date
    ) -> List[Trip]:
        membership = self.policy.ensure_member(ctx)

        return (
            self.db.query(Trip)
            .filter(
                and_(
                    Trip.household_id == membership.household_id,
                    Trip.start_date >= range_start,
                    Trip.start_date <= range_end,
                )
            )
            .order_by(Trip.start_date.asc(), Trip.id.asc())
            .all()
        )

    def create_trip(self, ctx: RequestContext, trip_data: TripCreate) -> Trip:
        membership = self.policy.ensure_member(ctx)

        error = ValidationHelpers.validate_date_range(
            trip_data.start_date, trip_data.end_date
        )
        if error:
            raise BusinessRuleViolationError(error)

        try:
            trip = Trip(
                name=trip_data.name,
                destination=trip_data.destination,
                start_date=trip_data.start_date,
                end_date=trip_data.end_date,
                notes=trip_data.notes,
                household_id=membership.household_id,
            )

            self.db.add(trip)
            self.db.commit()
            self.db.refresh(trip)

        except Exception as e:
            self.db.rollback()
            raise TripServiceError(f"Failed to create trip: {str(e)}")

        logger.info(f"Trip {trip.id} created in household {trip.household_id}")
        return trip

    def update_trip(
        self, ctx: RequestContext, trip_id: int, trip_update: TripUpdate
    ) -> Trip:
        """Apply only the supplied fields, then re-check the merged date range"""
        membership = self.policy.ensure_member(ctx)
        trip = self.get_household_trip_or_raise(membership.household_id, trip_id)

        update_data = trip_update.model_dump(exclude_unset=True)
        for field in REQUIRED_TRIP_FIELDS:
            if field in update_data and update_data[field] is None:
                raise BusinessRuleViolationError(f"{field} cannot be empty")

        for field in ("name", "destination"):
            if field in update_data:
                update_data[field] = update_data[field].strip()
                if not update_data[field]:
                    raise BusinessRuleViolationError(f"{field} cannot be empty")

        error = ValidationHelpers.validate_date_range(
            update_data.get("start_date", trip.start_date),
            update_data.get("end_date", trip.end_date),
        )
        if error:
            raise BusinessRuleViolationError(error)

        try:
            for field, value in update_data.items():
                setattr(trip, field, value)

            self.db.commit()
            self.db.refresh(trip)
            return trip

        except Exception as e:
            self.db.rollback()
            raise TripServiceError(f"Failed to update trip: {str(e)}")

    def delete_trip(self, ctx: RequestContext, trip_id: int) -> None:
        """Delete a trip together with its expenses and checklists"""
        membership = self.policy.ensure_member(ctx)
        trip = self.get_household_trip_or_raise(membership.household_id, trip_id)

        try:
            self.db.delete(trip)
            self.db.commit()

        except Exception as e:
            self.db.rollback()
            raise TripServiceError(f"Failed to delete trip: {str(e)}")

        logger.info(f"Trip {trip_id} deleted from household {membership.household_id}")

    def get_household_trip_or_raise(self, household_id: int, trip_id: int) -> Trip:
        """Trips of other households are reported as missing"""
        trip = (
            self.db.query(Trip)
            .filter(and_(Trip.id == trip_id, Trip.household_id == household_id))
            .first()
        )
        if not trip:
            raise TripNotFoundError(f"Trip {trip_id} not found")
        return trip
