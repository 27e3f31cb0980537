import os
from datetime import timedelta

SECRET_KEY = "test-secret"
JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=30)

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance_test"),
}

CORS_ORIGINS = ["http://localhost:3000"]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
