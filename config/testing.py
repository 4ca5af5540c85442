import os

from .config import db_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
SCAN_COOLDOWN_SECONDS = 0.0

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
