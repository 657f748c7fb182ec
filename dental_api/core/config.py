from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Literal

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    APP_NAME: str = "dental-records"
    ENV: Literal["local", "dev", "prod"] = "local"
    API_PREFIX: str = ""
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Relational store (patient records)
    RECORDS_DSN: str = "sqlite+aiosqlite:///./dental_records.db"
    DB_MANAGE: str = "create_all"  # create_all | none

    # Embedded document store (patients)
    PATIENT_DB_PATH: str = "dental_patients.json"

    # Sample data bootstrap
    SEED_SAMPLE_DATA: bool = True
    SAMPLE_PATIENT_COUNT: int = 50
    SAMPLE_BATCH_SIZE: int = 10

    @field_validator("RECORDS_DSN")
    @classmethod
    def _must_be_async(cls, v: str):
        if "+asyncpg" not in v and "+aiosqlite" not in v:
            raise ValueError("RECORDS_DSN must use an async driver (postgresql+asyncpg:// or sqlite+aiosqlite://)")
        return v

    @field_validator("SAMPLE_BATCH_SIZE")
    @classmethod
    def _positive_batch(cls, v: int):
        if v < 1:
            raise ValueError("SAMPLE_BATCH_SIZE must be at least 1")
        return v

settings = Settings()
