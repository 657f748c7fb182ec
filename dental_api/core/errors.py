import uuid
from fastapi import HTTPException, status


class DentalApiError(Exception):
    """Domain error raised by services; rendered by the app's exception handler."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReferenceNotFound(DentalApiError):
    """A record references a patient id that is not in the patient store."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, patient_id: uuid.UUID):
        super().__init__(f"Patient with ID {patient_id} not found")
        self.patient_id = patient_id


class PatientAlreadyExists(DentalApiError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, patient_id: uuid.UUID):
        super().__init__(f"Patient with ID {patient_id} already exists")
        self.patient_id = patient_id


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationMismatch(HTTPException):
    def __init__(self, detail: str = "ID mismatch"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
