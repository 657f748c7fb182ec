import logging
import random
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Sequence
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from dental_api.core.timeutils import utcnow
from dental_api.modules.patients.models import Patient
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.records.models import PatientRecord
from dental_api.modules.records.repository import RecordRepository

logger = logging.getLogger(__name__)

PROCEDURES = [
    "Regular Checkup", "Teeth Cleaning", "Fluoride Treatment", "Dental X-Ray",
    "Cavity Filling", "Root Canal", "Crown Placement", "Bridge Work",
    "Tooth Extraction", "Wisdom Tooth Removal", "Gum Treatment", "Teeth Whitening",
]
DENTISTS = [
    "Dr. Sarah Johnson", "Dr. Michael Chen", "Dr. Emily Rodriguez",
    "Dr. David Kim", "Dr. Lisa Patel", "Dr. Robert Williams",
]
TREATMENTS = [
    "Complete cleaning with fluoride application", "Filling applied to affected area",
    "Pain management and antibiotics prescribed", "Crown fitted and adjusted",
    "X-rays taken of full mouth", "Root canal performed on tooth #",
]
PRESCRIPTIONS = [
    "None", "Antibiotics for 7 days", "Pain medication as needed",
    "Medicated mouth rinse twice daily",
]
MAX_DAYS_BACK = 1095  # roughly three years


@dataclass
class SeedReport:
    created: int = 0
    failed: int = 0
    skipped: bool = False


def _diagnosis(index: int, tooth: int) -> str:
    if index % 3 == 0:
        return "Healthy teeth and gums"
    if index % 3 == 1:
        return f"Small cavity on tooth #{tooth}"
    return "Mild gingivitis"


def make_records(patient: Patient, rng: random.Random) -> list[dict]:
    """1 to 3 visit records for one patient, as column dicts."""
    now = utcnow()
    rows = []
    for i in range(rng.randint(1, 3)):
        record_date = now - timedelta(days=rng.randint(1, MAX_DAYS_BACK - 1))
        tooth = rng.randint(1, 31)
        treatment = rng.choice(TREATMENTS)
        if rng.random() < 0.5:
            treatment = f"{treatment} {tooth}"
        rows.append({
            "patient_id": patient.id,
            "record_date": record_date,
            "record_type": rng.choice(PROCEDURES),
            "description": f"Patient visit on {record_date:%m/%d/%Y}",
            "treatment": treatment,
            "diagnosis": _diagnosis(i, tooth),
            "prescription": PRESCRIPTIONS[i % 4],
            "notes": f"Patient {rng.choice(['reported', 'did not report'])} sensitivity.",
            "dentist_name": rng.choice(DENTISTS),
        })
    return rows


def _chunks(items: Sequence, size: int) -> Iterable[Sequence]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


async def insert_batch(session_factory: async_sessionmaker[AsyncSession], rows: list[dict]) -> tuple[int, int]:
    """
    Insert ``rows`` in one commit, falling back to one commit per row if that fails.

    Returns ``(succeeded, failed)``.
    """
    async with session_factory() as session:
        try:
            session.add_all([PatientRecord(**row) for row in rows])
            await session.commit()
            logger.debug(f"Added batch of {len(rows)} records")
            return len(rows), 0
        except SQLAlchemyError as e:
            await session.rollback()
            logger.warning(f"Failed to add batch of {len(rows)} records, retrying one by one: {e}")

    succeeded = failed = 0
    for row in rows:
        async with session_factory() as session:
            try:
                session.add(PatientRecord(**row))
                await session.commit()
                succeeded += 1
            except SQLAlchemyError as e:
                await session.rollback()
                failed += 1
                logger.warning(f"Failed to add record for patient {row.get('patient_id')}: {e}")
    return succeeded, failed


async def seed_records(
    session_factory: async_sessionmaker[AsyncSession],
    patients: PatientRepository,
    batch_size: int = 10,
    rng: random.Random | None = None,
) -> SeedReport:
    """Give every stored patient a few synthetic records, unless any record exists already."""
    async with session_factory() as session:
        if await RecordRepository(session).any():
            logger.info("Record store already has records; skipping sample data")
            return SeedReport(skipped=True)

    all_patients = await run_in_threadpool(patients.list)
    logger.info(f"Found {len(all_patients)} patients for sample records")
    if not all_patients:
        return SeedReport(skipped=True)

    rng = rng or random.Random()
    report = SeedReport()
    for batch in _chunks(all_patients, batch_size):
        rows = [row for p in batch for row in make_records(p, rng)]
        succeeded, failed = await insert_batch(session_factory, rows)
        report.created += succeeded
        report.failed += failed

    logger.info(f"Added {report.created} sample records, {report.failed} failed")
    return report
