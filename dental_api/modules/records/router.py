import uuid
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from dental_api.core.config import settings
from dental_api.core.db import get_session
from dental_api.core.errors import NotFound, ValidationMismatch
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.patients.router import get_patient_repository
from dental_api.modules.records.schemas import (
    PatientRecordsDetails, RecordCreate, RecordOut, RecordUpdate,
)
from dental_api.modules.records.service import RecordService

router = APIRouter()

def svc(
    session: AsyncSession = Depends(get_session),
    patients: PatientRepository = Depends(get_patient_repository),
) -> RecordService:
    return RecordService(session, patients)

@router.get("/patients/{patient_id}/records", response_model=list[RecordOut], summary="Get patient records")
async def list_patient_records(patient_id: uuid.UUID, service: RecordService = Depends(svc)):
    records = await service.list_records_for_patient(patient_id)
    if not records:
        raise NotFound("No records found for patient")
    return records

@router.get("/patients/{patient_id}/records/details", response_model=PatientRecordsDetails, summary="Get patient records with patient details")
async def get_patient_records_details(patient_id: uuid.UUID, service: RecordService = Depends(svc)):
    details = await service.join_records_with_patient_summary(patient_id)
    if details is None:
        raise NotFound("Patient not found")
    return details

@router.post("/patients/{patient_id}/records", response_model=RecordOut, status_code=status.HTTP_201_CREATED, summary="Add patient record")
async def create_record(
    patient_id: uuid.UUID,
    payload: RecordCreate,
    response: Response,
    service: RecordService = Depends(svc),
):
    # ReferenceNotFound propagates to the app-level handler as a 404
    obj = await service.create_record(patient_id, payload)
    response.headers["Location"] = f"{settings.API_PREFIX}/records/{obj.id}"
    return obj

@router.get("/records/{record_id}", response_model=RecordOut, summary="Get record by id")
async def get_record(record_id: int, service: RecordService = Depends(svc)):
    obj = await service.get_record(record_id)
    if not obj:
        raise NotFound("Record not found")
    return obj

@router.put("/records/{record_id}", response_model=RecordOut, summary="Replace record")
async def update_record(record_id: int, payload: RecordUpdate, service: RecordService = Depends(svc)):
    if payload.id is not None and payload.id != record_id:
        raise ValidationMismatch()
    obj = await service.update_record(record_id, payload)
    if not obj:
        raise NotFound("Record not found")
    return obj

@router.delete("/records/{record_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete record")
async def delete_record(record_id: int, service: RecordService = Depends(svc)):
    ok = await service.delete_record(record_id)
    if not ok:
        raise NotFound("Record not found")
    return
