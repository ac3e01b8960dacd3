import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "employee_records.config.production"

    if env in {"test", "testing"}:
        return "employee_records.config.testing"

    return "employee_records.config.development"
