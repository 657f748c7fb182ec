"""
Populate empty stores with sample patients and records without starting the API.

    python -m scripts.seed_sample_data
"""
import asyncio

from dental_api.core.config import settings
from dental_api.core.db import SessionLocal, init_models, dispose_engine
from dental_api.core.docstore import DocumentStore
from dental_api.core.logging import setup_logging
from dental_api.bootstrap import bootstrap_sample_data


async def main():
    setup_logging()
    print(f"Seeding patients into {settings.PATIENT_DB_PATH} and records into {settings.RECORDS_DSN}...")
    await init_models()
    try:
        with DocumentStore(settings.PATIENT_DB_PATH) as store:
            result = await bootstrap_sample_data(store, SessionLocal)
    finally:
        await dispose_engine()

    print(f"  - patients created: {result.patients_created}")
    if result.records.skipped:
        print("  - records: skipped (store not empty or no patients)")
    else:
        print(f"  - records created: {result.records.created}, failed: {result.records.failed}")
    for err in result.errors:
        print(f"  ! {err}")
    print("Done.")


if __name__ == "__main__":
    asyncio.run(main())
