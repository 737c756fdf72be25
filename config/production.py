import os

DATA_DIR = os.getenv("CLAIM_SYSTEM_DATA_DIR", "")

PASSWORD_SCHEME = os.getenv("PASSWORD_SCHEME", "sha256")

MIN_CLAIM_TOTAL = float(os.getenv("MIN_CLAIM_TOTAL", "100"))
MAX_ATTACHMENT_BYTES = int(os.getenv("MAX_ATTACHMENT_BYTES", str(5 * 1024 * 1024)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
