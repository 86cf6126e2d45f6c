"""Example: use the service layer directly (no Flask).

Controllers stay thin; the rules live in services.
"""

import importlib
from pathlib import Path

from config import get_settings_module

from src.worktime_tracker.worktime_tracker.container import build_container
from src.worktime_tracker.worktime_tracker.database.bootstrap import apply_schema, ensure_demo_users

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, week_starts_on=settings.WEEK_STARTS_ON)
    try:
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        ensure_demo_users(container.conn)

        sessions = container.sessions_for("example")
        result = sessions.login("employee1@store.com", "1234")
        if not result.success:
            print(result.error)
            return

        service = container.work_time_service
        service.record_work_time(result.user.id, work_date="2024-01-08", start_time="22:00", end_time="06:00")
        print(service.get_summary(result.user.id))
        for day in service.get_weekly_data(result.user.id):
            print(day.date, day.day_name, day.hours)
    finally:
        container.close()


if __name__ == "__main__":
    main()
