SECRET_KEY = "test-secret"

DB_CONFIG = {
    "path": ":memory:",
}

DEBUG = False
TESTING = True

SESSION_HOURS = 8
WEEK_STARTS_ON = "sunday"
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

AUTO_INIT_DB = True
AUTO_SEED_DB = True
