import uuid
from datetime import date, datetime
from pydantic import Field
from dental_api.core.schemas import CamelModel

class Patient(CamelModel):
    """A patient document as held in the embedded store."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    email: str = ""
    phone_number: str = ""
    address: str = ""
    last_appointment: datetime
    next_appointment: datetime | None = None
    notes: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
