"""
Visit records and their link to the patient store.

Records live in the relational store, patients in the document store. The
only link between them is ``PatientRecord.patient_id``, which is checked
against the patient store when a record is created and at no other time.
The check and the insert are separate calls, so a patient deleted in between
leaves an orphaned record behind; that window is accepted.
"""
import logging
import uuid
from typing import Sequence
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from dental_api.core.errors import ReferenceNotFound
from dental_api.core.timeutils import as_utc, utcnow
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.patients.schemas import PatientSummary
from dental_api.modules.records.models import PatientRecord
from dental_api.modules.records.repository import RecordRepository
from dental_api.modules.records.schemas import (
    MUTABLE_FIELDS, PatientRecordsDetails, RecordCreate, RecordOut, RecordUpdate,
)

logger = logging.getLogger(__name__)

class RecordService:
    def __init__(self, session: AsyncSession, patients: PatientRepository):
        self.session = session
        self.repo = RecordRepository(session)
        self.patients = patients

    async def create_record(self, patient_id: uuid.UUID, payload: RecordCreate) -> PatientRecord:
        """Persist a record for an existing patient.

        Raises ReferenceNotFound if the patient is not in the patient store.
        """
        if not await run_in_threadpool(self.patients.exists, patient_id):
            raise ReferenceNotFound(patient_id)

        data = payload.model_dump(include=set(MUTABLE_FIELDS))
        record_date = as_utc(payload.record_date) if payload.record_date else utcnow()
        obj = await self.repo.create(patient_id=patient_id, record_date=record_date, **data)
        await self.session.commit()
        logger.info(f"Created record {obj.id} for patient {patient_id}")
        return obj

    async def list_records_for_patient(self, patient_id: uuid.UUID) -> Sequence[PatientRecord]:
        # pure filter over the record store; the patient is not looked up
        return await self.repo.list_for_patient(patient_id)

    async def get_record(self, record_id: int) -> PatientRecord | None:
        return await self.repo.get(record_id)

    async def update_record(self, record_id: int, payload: RecordUpdate) -> PatientRecord | None:
        data = payload.model_dump(include=set(MUTABLE_FIELDS))
        if payload.record_date is not None:
            data["record_date"] = as_utc(payload.record_date)
        obj = await self.repo.update_fields(record_id, **data)
        if obj:
            await self.session.commit()
        return obj

    async def delete_record(self, record_id: int) -> bool:
        ok = await self.repo.delete(record_id)
        if ok:
            await self.session.commit()
            logger.info(f"Deleted record {record_id}")
        return ok

    async def join_records_with_patient_summary(self, patient_id: uuid.UUID) -> PatientRecordsDetails | None:
        # two independent fetches combined in memory; the stores cannot be joined
        patient = await run_in_threadpool(self.patients.get, patient_id)
        if patient is None:
            return None
        records = await self.repo.list_for_patient(patient_id)
        return PatientRecordsDetails(
            patient=PatientSummary.model_validate(patient, from_attributes=True),
            records=[RecordOut.model_validate(r) for r in records],
        )
