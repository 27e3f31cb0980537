"""School Attendance package.

This package is organized by feature modules (students, users, attendance)
with a thin Flask controller layer over service/repository layers.
"""
