from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_portal.school_portal.database.bootstrap import ensure_superadmin


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    parser = argparse.ArgumentParser(description="Create or reset the superadmin account.")
    parser.add_argument("--username", default=settings.SUPERADMIN_USERNAME)
    parser.add_argument("--password", default=settings.SUPERADMIN_PASSWORD)
    args = parser.parse_args()

    if not args.password:
        parser.error("a superadmin password is required (--password or SUPERADMIN_PASSWORD)")

    ensure_superadmin(db_config, username=args.username, password=args.password)

    print(
        f"OK: superadmin {args.username!r} ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
