import os

DATA_DIR = os.getenv("OVERTIME_DATA_DIR") or None
DATA_FILE_NAME = "overtime.json"

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
