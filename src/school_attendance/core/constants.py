"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NAME_MAX_LENGTH = 255
CLASS_GRADE_MAX_LENGTH = 50
MIN_PASSWORD_LENGTH = 6

STUDENT_SUMMARY_TEMPLATE = "Total Days: {total}, Present: {present}, Absent: {absent}"

DEMO_PASSWORD = "password"
