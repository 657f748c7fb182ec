import uuid
from fastapi import APIRouter, Depends, Response, status
from dental_api.core.config import settings
from dental_api.core.docstore import DocumentStore, get_document_store
from dental_api.core.errors import NotFound, ValidationMismatch
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.patients.schemas import PatientIn, PatientOut
from dental_api.modules.patients.service import PatientService

# Routes are plain def: TinyDB does blocking file I/O, so FastAPI runs them in its threadpool.
router = APIRouter()

def get_patient_repository(store: DocumentStore = Depends(get_document_store)) -> PatientRepository:
    return PatientRepository(store)

def svc(repo: PatientRepository = Depends(get_patient_repository)) -> PatientService:
    return PatientService(repo)

@router.get("", response_model=list[PatientOut], summary="Get all patients")
def list_patients(service: PatientService = Depends(svc)):
    return service.list_patients()

# registered before /{patient_id} so "search" is not parsed as an id
@router.get("/search", response_model=list[PatientOut], summary="Search patients by id, first name or last name")
def search_patients(q: str | None = None, service: PatientService = Depends(svc)):
    if not q or not q.strip():
        raise ValidationMismatch("Search term is required")
    patients = service.search_patients(q)
    if not patients:
        raise NotFound("No patients match the search term")
    return patients

@router.get("/{patient_id}", response_model=PatientOut, summary="Get patient by id")
def get_patient(patient_id: uuid.UUID, service: PatientService = Depends(svc)):
    obj = service.get_patient(patient_id)
    if not obj:
        raise NotFound("Patient not found")
    return obj

@router.post("", response_model=PatientOut, status_code=status.HTTP_201_CREATED, summary="Add new patient")
def create_patient(payload: PatientIn, response: Response, service: PatientService = Depends(svc)):
    obj = service.create_patient(payload)
    response.headers["Location"] = f"{settings.API_PREFIX}/patients/{obj.id}"
    return obj

@router.put("/{patient_id}", response_model=PatientOut, summary="Replace patient")
def replace_patient(patient_id: uuid.UUID, payload: PatientIn, service: PatientService = Depends(svc)):
    if payload.id is not None and payload.id != patient_id:
        raise ValidationMismatch()
    obj = service.replace_patient(patient_id, payload)
    if not obj:
        raise NotFound("Patient not found")
    return obj

@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete patient")
def delete_patient(patient_id: uuid.UUID, service: PatientService = Depends(svc)):
    ok = service.delete_patient(patient_id)
    if not ok:
        raise NotFound("Patient not found")
    return
