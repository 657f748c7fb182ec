import uuid
from datetime import datetime
from pydantic import Field
from dental_api.core.schemas import CamelModel
from dental_api.modules.patients.schemas import PatientSummary
from dental_api.modules.records.models import (
    RECORD_TYPE_MAX, DESCRIPTION_MAX, TREATMENT_MAX, DIAGNOSIS_MAX,
    PRESCRIPTION_MAX, NOTES_MAX, DENTIST_NAME_MAX,
)

class RecordCreate(CamelModel):
    # patient id comes from the path; a body value is ignored
    patient_id: uuid.UUID | None = None
    record_date: datetime | None = None
    record_type: str = Field("", max_length=RECORD_TYPE_MAX)
    description: str = Field("", max_length=DESCRIPTION_MAX)
    treatment: str = Field("", max_length=TREATMENT_MAX)
    diagnosis: str = Field("", max_length=DIAGNOSIS_MAX)
    prescription: str = Field("", max_length=PRESCRIPTION_MAX)
    notes: str = Field("", max_length=NOTES_MAX)
    dentist_name: str = Field("", max_length=DENTIST_NAME_MAX)

class RecordUpdate(RecordCreate):
    id: int | None = None

class RecordOut(CamelModel):
    id: int
    patient_id: uuid.UUID
    record_date: datetime
    record_type: str
    description: str
    treatment: str
    diagnosis: str
    prescription: str
    notes: str
    dentist_name: str

class PatientRecordsDetails(CamelModel):
    patient: PatientSummary
    records: list[RecordOut]

# Fields a create or update writes; id and patient_id are never replaced.
MUTABLE_FIELDS = (
    "record_type", "description", "treatment", "diagnosis",
    "prescription", "notes", "dentist_name",
)
