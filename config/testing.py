import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "students_url": os.getenv("STUDENTS_URL", "http://localhost:3001/students"),
    "attendance_url": os.getenv("ATTENDANCE_URL", "http://localhost:3001/attendances"),
    "timeout": float(os.getenv("FETCH_TIMEOUT", "2")),
}

REPORT_TITLE = "Overall Attendance Overview"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
