"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PERCENT_DECIMAL_PLACES = 2
GOOD_ATTENDANCE_THRESHOLD = 75
WARNING_ATTENDANCE_THRESHOLD = 50
INVALID_DATE_LABEL = "Invalid Date"
