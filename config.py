import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


# Household routing table. Overridden wholesale by DISTRIBUTION in env.yaml.
DEFAULT_DISTRIBUTION = {
    "primary_account_id": 1,
    "default_rule": "standard",
    "accounts": {
        "hoa": 2,
        "utilities": 3,
        "joint": 4,
        "savings": 5,
        "hanna": 6,
        "emma": 7,
        "mission_fed": 8,
    },
    "rules": {
        "standard": {
            "hoa": "35.00",
            "utilities": "2150.00",
            "joint": "80.00",
            "savings": "50.00",
            "hanna": "25.00",
            "emma": "25.00",
            "mission_fed": "200.00",
        },
    },
}


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./finance.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Paycheck distribution table (primary account, target accounts, rules)
    DISTRIBUTION = data.get("DISTRIBUTION", DEFAULT_DISTRIBUTION)

    # Monthly bill reset
    BILL_RESET_ENABLED = bool(data.get("BILL_RESET_ENABLED", True))
    BILL_RESET_DAY = data.get("BILL_RESET_DAY", 1)  # Day of month to reactivate bills
    BILL_RESET_CHECK_INTERVAL_SECONDS = data.get("BILL_RESET_CHECK_INTERVAL_SECONDS", 3600)
