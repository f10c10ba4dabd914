import os


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


# SQLAlchemy Database URL (SQLite for simplicity)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./rewards.db")

# Fixed account every card and transaction endpoint acts on
DEMO_USER_ID = int(os.getenv("DEMO_USER_ID", "1"))

SEED_SAMPLE_DATA = _as_bool(os.getenv("SEED_SAMPLE_DATA", "true"))
CREATE_TABLES_ON_STARTUP = _as_bool(os.getenv("CREATE_TABLES_ON_STARTUP", "true"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]
