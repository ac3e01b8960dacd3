"""Settings shared by every environment.

Each value can be overridden through the environment (or a ``.env`` file,
which ``create_app`` loads with python-dotenv).
"""
import os

from ..core.constants import DATA_FILE_NAME, DEFAULT_PAGE_SIZE, UPLOADS_DIR_NAME

DATA_DIR = os.getenv("DATA_DIR", "./data")
DATA_FILE_NAME = os.getenv("DATA_FILE_NAME", DATA_FILE_NAME)
UPLOADS_DIR_NAME = os.getenv("UPLOADS_DIR_NAME", UPLOADS_DIR_NAME)

# Write to a temp file and os.replace() it instead of overwriting in place.
ATOMIC_WRITES = bool(int(os.getenv("ATOMIC_WRITES", "0")))

# Single shared credential list: [(username, password), ...]
AUTH_USERS = [
    (os.getenv("ADMIN_USERNAME", "admin"), os.getenv("ADMIN_PASSWORD", "admin123")),
]

API_PREFIX = os.getenv("API_PREFIX", "/api")
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", str(DEFAULT_PAGE_SIZE)))
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Seed demo employees when the data file is empty.
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))
