import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "students_url": os.getenv(
        "STUDENTS_URL",
        "https://my-json-server.typicode.com/Geogeo357/sample_attendance_json/students",
    ),
    "attendance_url": os.getenv(
        "ATTENDANCE_URL",
        "https://my-json-server.typicode.com/Geogeo357/sample_attendance_json/attendances",
    ),
    "timeout": float(os.getenv("FETCH_TIMEOUT", "10")),
}

REPORT_TITLE = os.getenv("REPORT_TITLE", "Overall Attendance Overview (May 2025)")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
