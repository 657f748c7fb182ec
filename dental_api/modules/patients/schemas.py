import uuid
from datetime import date, datetime
from dental_api.core.schemas import CamelModel

class PatientIn(CamelModel):
    # id is optional on create (generated) and on replace (taken from the path)
    id: uuid.UUID | None = None
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    email: str = ""
    phone_number: str = ""
    address: str = ""
    last_appointment: datetime
    next_appointment: datetime | None = None
    notes: str = ""

class PatientOut(CamelModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    date_of_birth: date
    email: str
    phone_number: str
    address: str
    last_appointment: datetime
    next_appointment: datetime | None
    notes: str

class PatientSummary(CamelModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    date_of_birth: date
