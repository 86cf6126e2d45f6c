from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worktime_tracker.worktime_tracker.database.bootstrap import DEMO_USERS, apply_schema, ensure_demo_users
from src.worktime_tracker.worktime_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_path = str(settings.DB_CONFIG["path"])

    with DatabaseConnection(DBConfig(path=db_path)) as conn:
        apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
        ensure_demo_users(conn)

    print(f"OK: Seeded {len(DEMO_USERS)} demo users -> {db_path}")


if __name__ == "__main__":
    main()
