"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_FETCH_TIMEOUT = 10
ISO_YEAR_PREFIX_LEN = 5
PERCENTAGE_DECIMALS = 1
UNKNOWN_STUDENT_LABEL = "ID: {id}"
FALLBACK_STUDENT_NAME = "Selected Student"
EMPTY_STUDENT_CHOICE_LABEL = "-- Select a Student --"
FETCH_FAILURE_MESSAGE = "Failed to fetch attendance data."
DEFAULT_REPORT_TITLE = "Overall Attendance Overview"
