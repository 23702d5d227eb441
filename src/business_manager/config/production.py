import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "business_manager"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "/var/lib/business-manager/uploads")
REPORTS_FOLDER = os.getenv("REPORTS_FOLDER", "/var/lib/business-manager/reports")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# No default admin in production; set both to bootstrap the first account.
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
