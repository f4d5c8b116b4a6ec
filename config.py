import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = os.environ.get("DB_URI", data.get("DB_URI", "sqlite+aiosqlite:///./fuel_cards.db"))
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_PORT = int(os.environ.get("PORT", data.get("API_PORT", 3000)))
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = bool(data.get("CORS_ALLOW_CREDENTIALS", False))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", data.get("LOG_LEVEL", "INFO"))
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    ENABLE_SENTRY = bool(data.get("ENABLE_SENTRY", 0))
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Card Ledger Reconciliation
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily
