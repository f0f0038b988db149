from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = {**Config.db_config(), "database": "school_attendance_test"}
SCHOOL_YEAR = 2025

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
