"""Create the items table in the configured database.

Reads DATABASE_URL (or PG* variables) from .env / environment and creates all
registered ORM tables. Safe to run repeatedly.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import logging
import pathlib

from dotenv import load_dotenv

from items_api import models  # noqa: F401  (registers tables on Base.metadata)
from items_api.config import resolve_database_url
from items_api.db import create_app_engine
from items_api.models.base import Base

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]

logger = logging.getLogger("create_tables")


def main() -> int:
    """Create all ORM tables in the target database."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    logger.info("Tables %s ready on %s", sorted(Base.metadata.tables), engine.url.render_as_string())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
