import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "library-seating-secret"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "library_seating")

    # Seconds an input channel stays paused after a scan.
    SCAN_COOLDOWN_SECONDS = float(os.environ.get("SCAN_COOLDOWN_SECONDS", "2"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def db_config() -> dict:
    """mysql-connector keyword arguments built from the environment."""
    return {
        "host": Config.DB_HOST,
        "port": Config.DB_PORT,
        "user": Config.DB_USER,
        "password": Config.DB_PASSWORD,
        "database": Config.DB_NAME,
    }
