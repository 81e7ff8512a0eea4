"""Tests for trip checklists and their items."""

import pytest

from tripnest.schemas.checklist import (
    ChecklistCreate,
    ChecklistItemCreate,
    ChecklistItemUpdate,
    ChecklistResponse,
    ChecklistUpdate,
)
from tripnest.schemas.household import HouseholdCreate
from tripnest.services.checklist_service import (
    ChecklistItemNotFoundError,
    ChecklistNotFoundError,
    ChecklistService,
)
from tripnest.services.household_service import HouseholdService
from tripnest.services.trip_service import TripNotFoundError


@pytest.fixture
def checklist(db, owner, household, make_ctx, make_trip):
    trip = make_trip(owner)
    return ChecklistService(db).create_checklist(
        make_ctx(owner), trip.id, ChecklistCreate(name="Packing")
    )


@pytest.mark.unit
class TestChecklists:
    def test_new_checklist_is_empty(self, checklist):
        response = ChecklistResponse.model_validate(checklist)

        assert response.name == "Packing"
        assert response.total_items == 0
        assert response.progress == 0

    def test_unknown_trip(self, db, owner, household, make_ctx):
        with pytest.raises(TripNotFoundError):
            ChecklistService(db).create_checklist(
                make_ctx(owner), 999, ChecklistCreate(name="Packing")
            )

    def test_rename(self, db, owner, checklist, make_ctx):
        renamed = ChecklistService(db).rename_checklist(
            make_ctx(owner), checklist.id, ChecklistUpdate(name="Carry-on")
        )

        assert renamed.name == "Carry-on"

    def test_outsider_cannot_see_checklist(self, db, outsider, checklist, make_ctx):
        HouseholdService(db).create_household(
            make_ctx(outsider), HouseholdCreate(name="Elsewhere")
        )

        with pytest.raises(ChecklistNotFoundError):
            ChecklistService(db).delete_checklist(make_ctx(outsider), checklist.id)


@pytest.mark.unit
class TestChecklistItems:
    def test_items_start_unchecked_and_progress_updates(
        self, db, owner, checklist, make_ctx
    ):
        ctx = make_ctx(owner)
        service = ChecklistService(db)
        items = [
            service.add_item(ctx, checklist.id, ChecklistItemCreate(text=text))
            for text in ["Passports", "Chargers", "Sunscreen"]
        ]
        assert all(not item.checked for item in items)

        service.toggle_item(ctx, items[0].id, True)
        service.toggle_item(ctx, items[1].id, True)
        db.refresh(checklist)

        response = ChecklistResponse.model_validate(checklist)
        assert response.checked_items == 2
        assert response.total_items == 3
        assert response.progress == 67
        assert [i.text for i in response.items] == ["Passports", "Chargers", "Sunscreen"]

    def test_edit_text_keeps_checked_state(self, db, owner, checklist, make_ctx):
        ctx = make_ctx(owner)
        service = ChecklistService(db)
        item = service.add_item(ctx, checklist.id, ChecklistItemCreate(text="Passport"))
        service.toggle_item(ctx, item.id, True)

        updated = service.update_item(ctx, item.id, ChecklistItemUpdate(text="Passports"))

        assert updated.text == "Passports"
        assert updated.checked is True

    def test_delete_item(self, db, owner, checklist, make_ctx):
        ctx = make_ctx(owner)
        service = ChecklistService(db)
        item = service.add_item(ctx, checklist.id, ChecklistItemCreate(text="Map"))

        service.delete_item(ctx, item.id)

        with pytest.raises(ChecklistItemNotFoundError):
            service.toggle_item(ctx, item.id, True)
