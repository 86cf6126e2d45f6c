"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WORK_RECORDS_KEY = "work_time_records"
SESSION_KEY = "user_auth_session"

DEFAULT_SESSION_HOURS = 8
DEFAULT_HISTORY_LIMIT = 30
WEEKLY_SERIES_DAYS = 7

MINUTES_PER_DAY = 24 * 60

# Sunday-first, matching date index 0 == Sunday
DEFAULT_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Weekly pay rules
REGULAR_WEEKLY_HOURS = 40
OVERTIME_RATE = 1.5
HOLIDAY_PAY_MIN_HOURS = 15
HOLIDAY_PAY_DAILY_HOURS = 8
