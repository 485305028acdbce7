"""Standardwerte der Anwendung."""

# Autoren-API des Content-Anbieters
DEFAULT_API_BASE_URL = "https://app.pluralsight.com"

# SQLite-Datei relativ zum Arbeitsverzeichnis
DEFAULT_DATABASE_FILE = "courses.db"

# Deadline für einen API-Aufruf in Sekunden
DEFAULT_REQUEST_TIMEOUT = 30.0

DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_app_config():
    """Vollständige Default-Konfiguration."""
    from config.schema import AppConfig
    return AppConfig(
        api_base_url=DEFAULT_API_BASE_URL,
        database_file=DEFAULT_DATABASE_FILE,
        request_timeout_seconds=DEFAULT_REQUEST_TIMEOUT,
        log_level=DEFAULT_LOG_LEVEL,
    )
