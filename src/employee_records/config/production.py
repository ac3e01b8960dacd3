import os

from .base import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

ATOMIC_WRITES = bool(int(os.getenv("ATOMIC_WRITES", "1")))
