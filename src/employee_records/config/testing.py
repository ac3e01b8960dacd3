from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTH_USERS = [("admin", "admin123")]
AUTO_SEED_DATA = False
LOG_LEVEL = "WARNING"
