"""
Synthetic patient generator for first startup.

Fills an empty patient store with plausible-looking dental patients so the
API has something to serve. Does nothing if any patient is already stored.
"""
import logging
import random
import uuid
from datetime import date, timedelta
from dental_api.core.timeutils import utcnow
from dental_api.modules.patients.models import Patient
from dental_api.modules.patients.repository import PatientRepository

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "David", "Susan", "Richard", "Jessica", "Joseph", "Sarah",
    "Thomas", "Karen", "Charles", "Nancy", "Daniel", "Margaret", "Matthew", "Ashley",
    "Steven", "Kimberly", "Andrew", "Emily", "Kevin", "Amanda", "Brian", "Melissa",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Jones", "Brown", "Davis", "Miller", "Wilson",
    "Moore", "Taylor", "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin",
    "Thompson", "Garcia", "Martinez", "Robinson", "Clark", "Rodriguez", "Lewis", "Lee",
    "Walker", "Hall", "Allen", "Young", "Hernandez", "King", "Wright", "Lopez",
]
STREET_NAMES = [
    "Main", "Oak", "Maple", "Cedar", "Pine", "Elm", "Washington", "Lake", "Hill",
    "Park", "River", "Meadow", "Forest", "Valley", "Spring", "Church", "Mill", "Willow",
]
STREET_TYPES = ["St", "Ave", "Rd", "Blvd", "Ln", "Dr", "Way", "Pl", "Ct"]
CITIES = [
    "Springfield", "Georgetown", "Franklin", "Greenville", "Bristol", "Clinton",
    "Kingston", "Salem", "Madison", "Oxford", "Arlington", "Dover", "Hudson",
    "Portland", "Austin", "Nashville", "Raleigh", "Savannah",
]
STATES = [
    "AL", "AZ", "CA", "CO", "CT", "FL", "GA", "IL", "MA", "MD", "MI", "MN",
    "NC", "NJ", "NY", "OH", "OR", "PA", "TN", "TX", "VA", "WA", "WI",
]
NOTES = [
    "Needs fluoride treatment.", "Has dental anxiety.", "Regular check-up patient.",
    "Teeth whitening candidate.", "Root canal completed on #16.", "Dental implant on #7.",
    "Requires orthodontic evaluation.", "Gum disease treatment ongoing.", "High cavity risk.",
    "Sensitive teeth.", "Needs crown replacement.", "Wisdom teeth extracted.",
    "Requires night guard for bruxism.", "Periodontal maintenance.", "History of TMJ issues.",
    "Requires special care due to diabetes.", "Good oral hygiene habits.",
]

MIN_AGE = 18
MAX_AGE = 90
NEXT_APPOINTMENT_CHANCE = 0.7


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def _birth_date(rng: random.Random, today: date) -> date:
    # age in whole years is MIN_AGE..MAX_AGE-1
    age = rng.randint(MIN_AGE, MAX_AGE - 1)
    return _years_ago(today, age) - timedelta(days=rng.randint(0, 364))


def make_patient(rng: random.Random) -> Patient:
    now = utcnow()
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    next_appointment = None
    if rng.random() < NEXT_APPOINTMENT_CHANCE:
        next_appointment = now + timedelta(days=rng.randint(1, 364))
    address = (
        f"{rng.randint(1, 9999)} {rng.choice(STREET_NAMES)} {rng.choice(STREET_TYPES)}, "
        f"{rng.choice(CITIES)}, {rng.choice(STATES)} {rng.randint(10000, 99999)}"
    )
    return Patient(
        id=uuid.uuid4(),
        first_name=first,
        last_name=last,
        date_of_birth=_birth_date(rng, date.today()),
        email=f"{first.lower()}.{last.lower()}@example.com",
        phone_number=f"{rng.randint(200, 999)}-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
        address=address,
        last_appointment=now - timedelta(days=rng.randint(1, 730)),
        next_appointment=next_appointment,
        notes=rng.choice(NOTES),
    )


def seed_patients(repo: PatientRepository, count: int = 50, rng: random.Random | None = None) -> int:
    """Insert ``count`` synthetic patients if the store is empty. Returns how many were inserted."""
    existing = repo.count()
    if existing:
        logger.info(f"Patient store already has {existing} patients; skipping sample data")
        return 0
    rng = rng or random.Random()
    inserted = repo.insert_many(make_patient(rng) for _ in range(count))
    logger.info(f"Added {inserted} sample patients")
    return inserted
