import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Optional JSON file with {"students": [{"_id": ..., "attendance": [...]}]}
ATTENDANCE_SEED_FILE = os.getenv("ATTENDANCE_SEED_FILE") or None
