import uuid
from typing import Iterable
from tinydb import Query
from dental_api.core.docstore import DocumentStore
from dental_api.modules.patients.models import Patient

TABLE = "patients"

class PatientRepository:
    """Patient documents in the embedded store, keyed by the string form of their UUID."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @property
    def _table(self):
        return self.store.table(TABLE)

    @staticmethod
    def _to_doc(patient: Patient) -> dict:
        return patient.model_dump(mode="json")

    @staticmethod
    def _from_doc(doc: dict) -> Patient:
        return Patient.model_validate(doc)

    def count(self) -> int:
        with self.store.lock:
            return len(self._table)

    def list(self) -> list[Patient]:
        with self.store.lock:
            docs = self._table.all()
        return [self._from_doc(d) for d in docs]

    def get(self, patient_id: uuid.UUID) -> Patient | None:
        with self.store.lock:
            doc = self._table.get(Query().id == str(patient_id))
        return self._from_doc(doc) if doc else None

    def exists(self, patient_id: uuid.UUID) -> bool:
        with self.store.lock:
            return self._table.contains(Query().id == str(patient_id))

    def insert(self, patient: Patient) -> Patient:
        with self.store.lock:
            self._table.insert(self._to_doc(patient))
        return patient

    def insert_many(self, patients: Iterable[Patient]) -> int:
        docs = [self._to_doc(p) for p in patients]
        with self.store.lock:
            self._table.insert_multiple(docs)
        return len(docs)

    def replace(self, patient: Patient) -> bool:
        with self.store.lock:
            updated = self._table.update(self._to_doc(patient), Query().id == str(patient.id))
        return bool(updated)

    def delete(self, patient_id: uuid.UUID) -> bool:
        with self.store.lock:
            removed = self._table.remove(Query().id == str(patient_id))
        return bool(removed)
