import logging
import random
from dataclasses import dataclass, field
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from dental_api.core.config import settings
from dental_api.core.docstore import DocumentStore
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.patients.seed import seed_patients
from dental_api.modules.records.seed import SeedReport, seed_records

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    patients_created: int = 0
    records: SeedReport = field(default_factory=SeedReport)
    errors: list[str] = field(default_factory=list)


async def bootstrap_sample_data(
    store: DocumentStore,
    session_factory: async_sessionmaker[AsyncSession],
    *,
    patient_count: int | None = None,
    batch_size: int | None = None,
    rng: random.Random | None = None,
) -> BootstrapResult:
    """
    Fill empty stores with sample patients, then sample records for them.

    Never raises: a failing phase is logged and recorded in ``errors`` and
    startup carries on with whatever was written.
    """
    result = BootstrapResult()
    repo = PatientRepository(store)
    rng = rng or random.Random()
    if patient_count is None:
        patient_count = settings.SAMPLE_PATIENT_COUNT
    if batch_size is None:
        batch_size = settings.SAMPLE_BATCH_SIZE

    try:
        # TinyDB writes block, keep them off the event loop
        result.patients_created = await run_in_threadpool(seed_patients, repo, patient_count, rng=rng)
    except Exception as e:
        logger.error(f"Error initializing sample patients: {e}", exc_info=True)
        result.errors.append(f"patients: {e}")

    try:
        result.records = await seed_records(session_factory, repo, batch_size, rng=rng)
    except Exception as e:
        logger.error(f"Error initializing sample records: {e}", exc_info=True)
        result.errors.append(f"records: {e}")

    return result
