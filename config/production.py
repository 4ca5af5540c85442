import os

from .config import Config, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
SCAN_COOLDOWN_SECONDS = Config.SCAN_COOLDOWN_SECONDS

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
