"""Attendance Chart package.

This package is organized by feature modules (students, attendance, selection,
dashboard, ...) with a thin Flask controller layer over pure aggregation and
drill-down functions.
"""
