import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", "worktime_dev.db"),
}

DEBUG = True

SESSION_HOURS = int(os.getenv("SESSION_HOURS", "8"))
# "sunday" or "monday"
WEEK_STARTS_ON = os.getenv("WEEK_STARTS_ON", "sunday")
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
