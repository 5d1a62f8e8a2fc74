"""Create (or drop) the user tables. Run with ``python -m userservice.db.create_tables``."""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from userservice.core.config import get_settings
from userservice.core.log import configure_logging

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the users table on Base.metadata

logger = logging.getLogger("userservice.db")


def create_all(engine: Engine | None = None) -> None:
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def drop_all(engine: Engine | None = None) -> None:
    engine = engine or get_engine()
    Base.metadata.drop_all(bind=engine)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create the user service tables")
    ap.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = ap.parse_args(argv)

    configure_logging(get_settings().log_level)
    if args.drop:
        drop_all()
    create_all()
    print("Database tables created successfully.")


if __name__ == "__main__":
    try:
        main()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
