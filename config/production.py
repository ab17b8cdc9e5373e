import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ATTENDANCE_SEED_FILE = os.getenv("ATTENDANCE_SEED_FILE") or None
