import uuid
from typing import Sequence
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from dental_api.modules.records.models import PatientRecord

class RecordRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **data) -> PatientRecord:
        obj = PatientRecord(**data)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, record_id: int) -> PatientRecord | None:
        return await self.session.get(PatientRecord, record_id)

    async def list_for_patient(self, patient_id: uuid.UUID) -> Sequence[PatientRecord]:
        q = select(PatientRecord).where(
            PatientRecord.patient_id == patient_id,
        ).order_by(PatientRecord.record_date.desc(), PatientRecord.id.desc())
        res = await self.session.execute(q)
        return res.scalars().all()

    async def count(self) -> int:
        res = await self.session.execute(select(func.count()).select_from(PatientRecord))
        return res.scalar_one()

    async def any(self) -> bool:
        res = await self.session.execute(select(PatientRecord.id).limit(1))
        return res.first() is not None

    async def update_fields(self, record_id: int, **data) -> PatientRecord | None:
        obj = await self.get(record_id)
        if not obj:
            return None
        for k, v in data.items():
            setattr(obj, k, v)
        await self.session.flush()
        return obj

    async def delete(self, record_id: int) -> bool:
        obj = await self.get(record_id)
        if not obj:
            return False
        await self.session.delete(obj)
        await self.session.flush()
        return True
