import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "students_url": os.getenv("STUDENTS_URL", ""),
    "attendance_url": os.getenv("ATTENDANCE_URL", ""),
    "timeout": float(os.getenv("FETCH_TIMEOUT", "10")),
}

REPORT_TITLE = os.getenv("REPORT_TITLE", "Overall Attendance Overview")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
