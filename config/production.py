import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", "worktime.db"),
}

DEBUG = False

SESSION_HOURS = int(os.getenv("SESSION_HOURS", "8"))
WEEK_STARTS_ON = os.getenv("WEEK_STARTS_ON", "sunday")
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
