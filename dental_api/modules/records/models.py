import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer
from dental_api.core.base import Base, UTCDateTime
from dental_api.core.timeutils import utcnow

# Column widths; the API schemas reject anything longer.
RECORD_TYPE_MAX = 50
DESCRIPTION_MAX = 1000
TREATMENT_MAX = 1000
DIAGNOSIS_MAX = 1000
PRESCRIPTION_MAX = 500
NOTES_MAX = 2000
DENTIST_NAME_MAX = 100

class PatientRecord(Base):
    __tablename__ = "patient_records"
    # ids are never handed out twice, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Refers to a patient in the document store; no FK, the stores are separate.
    patient_id: Mapped[uuid.UUID] = mapped_column(index=True)
    record_date: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow)
    record_type: Mapped[str] = mapped_column(String(RECORD_TYPE_MAX), default="")  # e.g. Cleaning, Exam, X-Ray
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX), default="")
    treatment: Mapped[str] = mapped_column(String(TREATMENT_MAX), default="")
    diagnosis: Mapped[str] = mapped_column(String(DIAGNOSIS_MAX), default="")
    prescription: Mapped[str] = mapped_column(String(PRESCRIPTION_MAX), default="")
    notes: Mapped[str] = mapped_column(String(NOTES_MAX), default="")
    dentist_name: Mapped[str] = mapped_column(String(DENTIST_NAME_MAX), default="")
