
SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ATTENDANCE_SEED_FILE = None
