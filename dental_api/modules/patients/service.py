import logging
import uuid
from dental_api.core.errors import PatientAlreadyExists
from dental_api.modules.patients.models import Patient
from dental_api.modules.patients.repository import PatientRepository
from dental_api.modules.patients.schemas import PatientIn

logger = logging.getLogger(__name__)

def _parse_uuid(term: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(term)
    except ValueError:
        return None

class PatientService:
    def __init__(self, repo: PatientRepository):
        self.repo = repo

    def list_patients(self) -> list[Patient]:
        return self.repo.list()

    def get_patient(self, patient_id: uuid.UUID) -> Patient | None:
        return self.repo.get(patient_id)

    def search_patients(self, term: str) -> list[Patient]:
        """Look a patient up by id, or match first/last/full name case-insensitively."""
        term = term.strip()
        patient_id = _parse_uuid(term)
        if patient_id is not None:
            patient = self.repo.get(patient_id)
            return [patient] if patient else []

        needle = term.lower()
        return [
            p for p in self.repo.list()
            if needle in p.first_name.lower()
            or needle in p.last_name.lower()
            or needle in p.full_name.lower()
        ]

    def create_patient(self, payload: PatientIn) -> Patient:
        data = payload.model_dump(exclude={"id"})
        patient = Patient(id=payload.id or uuid.uuid4(), **data)
        if self.repo.exists(patient.id):
            raise PatientAlreadyExists(patient.id)
        self.repo.insert(patient)
        logger.info(f"Created patient {patient.id}")
        return patient

    def replace_patient(self, patient_id: uuid.UUID, payload: PatientIn) -> Patient | None:
        patient = Patient(id=patient_id, **payload.model_dump(exclude={"id"}))
        if not self.repo.replace(patient):
            return None
        return patient

    def delete_patient(self, patient_id: uuid.UUID) -> bool:
        ok = self.repo.delete(patient_id)
        if ok:
            # records referencing this patient are left in place
            logger.info(f"Deleted patient {patient_id}")
        return ok
