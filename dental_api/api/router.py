from fastapi import APIRouter
from dental_api.modules.patients.router import router as patients_router
from dental_api.modules.records.router import router as records_router

api_router = APIRouter()
api_router.include_router(patients_router, prefix="/patients", tags=["patients"])
api_router.include_router(records_router, tags=["records"])
# records_router carries both /patients/{id}/records and /records/{id}

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
