import os

DATA_DIR = os.getenv("CLAIM_SYSTEM_DATA_DIR", ".test-data")

PASSWORD_SCHEME = "sha256"

MIN_CLAIM_TOTAL = 100.0
MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_FILE = None
