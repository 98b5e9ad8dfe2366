"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

APP_NAME = "overtime"
DATA_FILE_NAME = "overtime.json"

STORAGE_DATE_FORMAT = "%Y-%m-%d"

MINUTES_PER_HOUR = 60
# Upper bound of a signed 32-bit minute counter.
MAX_MINUTES = 2**31 - 1

NO_ENTRIES_MESSAGE = "No overtime entries found."
