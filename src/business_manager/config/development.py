import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "business_manager"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data and the admin account on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
REPORTS_FOLDER = os.getenv("REPORTS_FOLDER", "reports")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
