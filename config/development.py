import os

from .config import Config, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SCAN_COOLDOWN_SECONDS = Config.SCAN_COOLDOWN_SECONDS

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo rooms and members on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
