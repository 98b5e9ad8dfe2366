import os

# Empty means the platform's per-application data directory
DATA_DIR = os.getenv("OVERTIME_DATA_DIR") or None
DATA_FILE_NAME = "overtime.json"

DEBUG = bool(int(os.getenv("DEBUG", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
