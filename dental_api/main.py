import logging
import time
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# Load environment variables from .env file before anything else
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from dental_api.core.config import settings
from dental_api.core.logging import setup_logging, request_id_ctx
from dental_api.core import db
from dental_api.core.docstore import DocumentStore
from dental_api.core.errors import DentalApiError
from dental_api.api.router import api_router
from dental_api.bootstrap import bootstrap_sample_data

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = DocumentStore(settings.PATIENT_DB_PATH).open()
    app.state.document_store = store
    try:
        await db.init_models()
        if settings.SEED_SAMPLE_DATA:
            result = await bootstrap_sample_data(store, db.SessionLocal)
            logger.info(
                f"Sample data: {result.patients_created} patients, "
                f"{result.records.created} records ({result.records.failed} failed)"
            )
        yield
    finally:
        store.close()
        await db.dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="Dental patients (embedded document store) and their visit records (SQL).",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = (time.time() - start_time) * 1000
        logger.info(
            f"Request: {request.method} {request.url.path} - Response: {response.status_code} - Time: {process_time:.2f}ms"
        )
        return response

    # added last so it runs first and the request id is set for the logging middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        rid = request.headers.get("x-request-id", "-")
        token = request_id_ctx.set(rid)
        try:
            return await call_next(request)
        finally:
            request_id_ctx.reset(token)

    @app.exception_handler(DentalApiError)
    async def dental_api_error_handler(request: Request, exc: DentalApiError):
        logger.info(f"{type(exc).__name__} for {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An internal server error occurred."},
        )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()


def run():
    """Serve the API with uvicorn (the ``dental-records`` console script)."""
    import uvicorn
    uvicorn.run("dental_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
