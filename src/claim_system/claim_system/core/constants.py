"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

APP_FOLDER_NAME = "ClaimSystem"
CLAIMS_FILENAME = "claims.json"
LECTURERS_FILENAME = "lecturers.json"
FILES_DIRNAME = "Files"

DEFAULT_MIN_CLAIM_TOTAL = 100.0
DEFAULT_MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024
ALLOWED_ATTACHMENT_EXTENSIONS = frozenset({".pdf", ".doc", ".docx", ".xls", ".xlsx"})

SUBMITTED_AT_FORMAT = "%Y-%m-%d %H:%M"
