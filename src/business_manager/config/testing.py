import os
import tempfile

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "business_manager_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "business-manager-test", "uploads")
REPORTS_FOLDER = os.path.join(tempfile.gettempdir(), "business-manager-test", "reports")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

LOG_LEVEL = "WARNING"

ADMIN_USERNAME = None
ADMIN_PASSWORD = None

SESSION_DAYS = 7
