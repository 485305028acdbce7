from pydantic import BaseModel, Field, field_validator

from config.defaults import (
    DEFAULT_API_BASE_URL,
    DEFAULT_DATABASE_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
    LOG_LEVELS,
)


class AppConfig(BaseModel):
    """Konfiguration für Abruf und Speicherung der Kurse."""
    # Basis-URL der API; ohne abschließenden Schrägstrich
    api_base_url: str = Field(DEFAULT_API_BASE_URL,
        description="Basis-URL der Autoren-API")
    # SQLite-Datei (":memory:" = nur im Speicher)
    database_file: str = Field(DEFAULT_DATABASE_FILE,
        description="Datenbankdatei für die Kurse")
    # Deadline pro HTTP-Aufruf
    request_timeout_seconds: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0,
        description="Timeout pro API-Aufruf in Sekunden")
    log_level: str = Field(DEFAULT_LOG_LEVEL,
        description="DEBUG, INFO, WARNING oder ERROR")

    @field_validator("api_base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base_url muss mit http:// oder https:// beginnen: {v!r}")
        return v

    @field_validator("database_file")
    @classmethod
    def check_database_file(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("database_file darf nicht leer sein")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level muss einer von {LOG_LEVELS} sein, nicht {v!r}")
        return v
