"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GRACE_PERIOD_MINUTES = 15
MAX_GRACE_PERIOD_MINUTES = 60

UNDERTIME_HOUR_MINUTES = 60
OVERTIME_THRESHOLD_MINUTES = 60

UTILITY_MIN_WORKED_HOURS = 8

# Time-out date auto-fill windows (hours, inclusive).
OVERNIGHT_TIME_OUT_MAX_HOUR = 14
OVERNIGHT_TIME_IN_MIN_HOUR = 14
UNSCHEDULED_TIME_OUT_MAX_HOUR = 12
UNSCHEDULED_TIME_IN_MIN_HOUR = 18
