"""Create the schema and (optionally) the demo accounts for the configured APP_ENV.

    python scripts/setup_db.py            # tables only
    python scripts/setup_db.py --seed     # tables + admin/teacher demo users
"""

from __future__ import annotations

import argparse
import importlib
import logging

from dotenv import load_dotenv

from school_attendance.config import get_settings_module
from school_attendance.database.bootstrap import apply_schema, ensure_demo_users, list_tables
from school_attendance.main import SCHEMA_PATH

logger = logging.getLogger("setup_db")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="upsert the demo admin and teacher accounts")
    parser.add_argument("--skip-schema", action="store_true", help="do not apply database/schema.sql")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    settings_module = get_settings_module()
    db_config = dict(importlib.import_module(settings_module).DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    if not args.skip_schema:
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema applied -> %s (tables=%d)", target, len(list_tables(db_config)))
    if args.seed:
        ensure_demo_users(db_config)
        logger.info("demo users seeded -> %s", target)


if __name__ == "__main__":
    main()
