"""
Mock Data Generator for TripNest
Run this script to populate your development database with realistic test data.

Usage:
    python create_mock_data.py

Requirements:
    pip install -e ".[seed]"
"""

import random
import uuid
from datetime import date, timedelta
from decimal import Decimal
from faker import Faker
from sqlalchemy.orm import Session

from tripnest.database import SessionLocal, init_db
from tripnest.models import (
    User,
    Household,
    HouseholdMember,
    Trip,
    Expense,
    Checklist,
    ChecklistItem,
)
from tripnest.models.enums import (
    HouseholdRole,
    MembershipStatus,
    ExpenseCategory,
    Currency,
)

# Initialize Faker
fake = Faker()

CHECKLIST_TEMPLATES = {
    "Packing": ["Passports", "Chargers", "Sunscreen", "Travel adapter", "Swimwear"],
    "Before leaving": ["Water the plants", "Book airport parking", "Print tickets"],
    "Bookings": ["Hotel", "Car rental", "Museum tickets"],
}


class MockDataGenerator:
    def __init__(self, db: Session):
        self.db = db
        self.users = []
        self.households = []
        self.trips = []

    def clear_existing_data(self):
        """Clear existing data (use with caution!)"""
        print("🗑️  Clearing existing data...")

        # Delete in reverse dependency order
        self.db.query(ChecklistItem).delete()
        self.db.query(Checklist).delete()
        self.db.query(Expense).delete()
        self.db.query(Trip).delete()
        self.db.query(HouseholdMember).delete()
        self.db.query(Household).delete()
        self.db.query(User).delete()

        self.db.commit()
        print("✅ Existing data cleared")

    def create_users(self, count=8):
        """Create mock users mirroring Supabase accounts"""
        print(f"👥 Creating {count} users...")

        dev_users = [
            {"email": "alex@test.com", "name": "Alex Traveller"},
            {"email": "sam@test.com", "name": "Sam Traveller"},
        ]

        for dev_user in dev_users:
            user = User(
                email=dev_user["email"],
                name=dev_user["name"],
                supabase_id=str(uuid.uuid4()),
                is_active=True,
                email_verified=True,
            )
            self.db.add(user)
            self.users.append(user)
            print(f"✅ Created dev user: {dev_user['email']}")

        for _ in range(count - len(dev_users)):
            user = User(
                email=fake.unique.email(),
                name=fake.name(),
                supabase_id=str(uuid.uuid4()),
                is_active=True,
                email_verified=random.choice([True, False]),
            )
            self.db.add(user)
            self.users.append(user)

        self.db.commit()
        print(f"✅ Created {len(self.users)} users")

    def create_households(self):
        """Pair users into households; odd users out get a pending invite"""
        print("🏠 Creating households...")

        for owner, partner in zip(self.users[0::2], self.users[1::2]):
            household = Household(name=f"{owner.name.split()[0]} & {partner.name.split()[0]}")
            self.db.add(household)
            self.db.flush()

            self.db.add(
                HouseholdMember(
                    household_id=household.id,
                    user_id=owner.id,
                    role=HouseholdRole.OWNER.value,
                    status=MembershipStatus.ACTIVE.value,
                )
            )

            if random.random() < 0.75:
                self.db.add(
                    HouseholdMember(
                        household_id=household.id,
                        user_id=partner.id,
                        role=HouseholdRole.MEMBER.value,
                        status=MembershipStatus.ACTIVE.value,
                        invited_email=partner.email,
                    )
                )
            else:
                self.db.add(
                    HouseholdMember(
                        household_id=household.id,
                        role=HouseholdRole.MEMBER.value,
                        status=MembershipStatus.PENDING.value,
                        invited_email=partner.email,
                    )
                )

            self.households.append(household)

        self.db.commit()
        print(f"✅ Created {len(self.households)} households")

    def create_trips(self, count_per_household=5):
        print(f"✈️  Creating trips ({count_per_household} per household)...")

        for household in self.households:
            for _ in range(count_per_household):
                start = fake.date_between(start_date="-1y", end_date="+1y")
                trip = Trip(
                    name=f"{fake.city()} {random.choice(['getaway', 'trip', 'weekend'])}",
                    destination=f"{fake.city()}, {fake.country()}",
                    start_date=start,
                    end_date=start + timedelta(days=random.randint(0, 14)),
                    notes=fake.sentence() if random.choice([True, False]) else None,
                    household_id=household.id,
                )
                self.db.add(trip)
                self.trips.append(trip)

        self.db.commit()
        print(f"✅ Created {len(self.trips)} trips")

    def create_expenses(self, max_per_trip=10):
        print(f"💰 Creating expenses (up to {max_per_trip} per trip)...")

        total = 0
        for trip in self.trips:
            payers = [m.user_id for m in trip.household.get_active_members()]
            currency = random.choice(list(Currency)).value

            for _ in range(random.randint(0, max_per_trip)):
                offset = random.randint(0, (trip.end_date - trip.start_date).days)
                self.db.add(
                    Expense(
                        amount=Decimal(str(round(random.uniform(5, 800), 2))),
                        currency=currency,
                        category=random.choice(list(ExpenseCategory)).value,
                        description=fake.sentence(nb_words=3).rstrip("."),
                        date=trip.start_date + timedelta(days=offset),
                        paid_by=random.choice(payers) if payers else None,
                        trip_id=trip.id,
                    )
                )
                total += 1

        self.db.commit()
        print(f"✅ Created {total} expenses")

    def create_checklists(self):
        print("📝 Creating checklists...")

        total = 0
        for trip in self.trips:
            for name in random.sample(list(CHECKLIST_TEMPLATES), k=random.randint(0, 2)):
                checklist = Checklist(name=name, trip_id=trip.id)
                self.db.add(checklist)
                self.db.flush()

                finished = trip.end_date < date.today()
                for text in CHECKLIST_TEMPLATES[name]:
                    self.db.add(
                        ChecklistItem(
                            text=text,
                            checked=finished or random.choice([True, False]),
                            checklist_id=checklist.id,
                        )
                    )
                total += 1

        self.db.commit()
        print(f"✅ Created {total} checklists")

    def generate_all_data(self, clear_existing=False):
        """Generate all mock data"""
        if clear_existing:
            self.clear_existing_data()

        # Create data in dependency order
        self.create_users(count=8)
        self.create_households()
        self.create_trips(count_per_household=5)
        self.create_expenses(max_per_trip=10)
        self.create_checklists()

        print("🎉 Mock data generation completed!")
        print("📊 Summary:")
        print(f"   - Users: {len(self.users)}")
        print(f"   - Households: {len(self.households)}")
        print(f"   - Trips: {len(self.trips)}")


def main():
    """Main function to run the mock data generator"""
    print("🧳 TripNest Mock Data Generator")
    print("=" * 40)

    init_db()

    db = SessionLocal()

    try:
        generator = MockDataGenerator(db)

        clear_existing = input("Clear existing data? (y/N): ").lower().startswith("y")

        generator.generate_all_data(clear_existing=clear_existing)

        print("\n✅ Mock data generation successful!")

    except Exception as e:
        print(f"\n❌ Error generating mock data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
