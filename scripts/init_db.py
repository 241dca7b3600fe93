"""Create the school database, apply the schema and optionally seed the superadmin.

    python scripts/init_db.py                      # schema only
    python scripts/init_db.py --with-superadmin    # schema + SUPERADMIN_* account
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_portal.school_portal.database.bootstrap import SCHEMA_PATH, apply_schema, ensure_superadmin, list_tables

EXPECTED_TABLES = {"users", "classes", "subjects", "students", "attendance_records", "mark_records"}


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    parser = argparse.ArgumentParser(description="Initialise the school portal database.")
    parser.add_argument("--schema", type=Path, default=SCHEMA_PATH, help="schema file to apply")
    parser.add_argument(
        "--with-superadmin",
        action="store_true",
        help="also create or reset the superadmin from SUPERADMIN_USERNAME / SUPERADMIN_PASSWORD",
    )
    args = parser.parse_args()

    apply_schema(db_config, schema_path=args.schema)
    tables = set(list_tables(db_config))
    missing = sorted(EXPECTED_TABLES - tables)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    if missing:
        print(f"ERROR: schema applied to {target} but tables are missing: {', '.join(missing)}", file=sys.stderr)
        return 1
    print(f"OK: schema ready -> {target} (tables={len(tables)})")

    if args.with_superadmin:
        password = getattr(settings, "SUPERADMIN_PASSWORD", None)
        if not password:
            print("ERROR: SUPERADMIN_PASSWORD is not set", file=sys.stderr)
            return 1
        ensure_superadmin(db_config, username=settings.SUPERADMIN_USERNAME, password=password)
        print(f"OK: superadmin {settings.SUPERADMIN_USERNAME!r} ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
