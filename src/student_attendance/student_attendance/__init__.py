"""Student Attendance package.

This package is organized by feature modules (attendance, ...) with a thin
Flask controller layer on top of pure aggregation and service layers.
"""
