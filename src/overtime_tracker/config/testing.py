import os

DATA_DIR = os.getenv("OVERTIME_DATA_DIR") or None
DATA_FILE_NAME = "overtime.json"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"
