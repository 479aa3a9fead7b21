"""SQLAlchemy engine + session management.

Uses a session-per-request pattern: mutating views commit before building
their response, and teardown closes the session.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from flask import Flask, g
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from items_api import models  # noqa: F401  (registers tables on Base.metadata)
from items_api.models.base import Base

logger = logging.getLogger(__name__)


def _generate_rds_iam_token(*, host: str, port: int, user: str, region: str) -> str:
    """Generate an RDS IAM auth token to use as the Postgres password.

    Uses whatever AWS credentials boto3 resolves (env, profile, web identity).
    """

    import boto3

    rds = boto3.client("rds", region_name=region)
    return rds.generate_db_auth_token(
        DBHostname=host,
        Port=port,
        DBUsername=user,
        Region=region,
    )


def _iam_connection_creator(
    *,
    host: str,
    port: int,
    user: str,
    database: str,
    region: str,
    sslmode: str,
) -> Callable[[], object]:
    """DBAPI connect callable that mints a fresh IAM token per connection."""

    def _creator() -> object:
        import psycopg2

        token = _generate_rds_iam_token(host=host, port=port, user=user, region=region)
        return psycopg2.connect(
            host=host,
            port=port,
            user=user,
            password=token,
            dbname=database,
            sslmode=sslmode,
        )

    return _creator


def create_app_engine(database_url: str) -> Engine:
    """Build the engine for ``database_url``.

    A Postgres URL without a password switches to IAM token auth when
    AWS_REGION is set.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "postgresql" and not url.password:
        region = os.getenv("AWS_REGION")
        if region and url.host and url.username and url.database:
            port = int(url.port or 5432)
            sslmode = (url.query or {}).get("sslmode") or os.getenv("PGSSLMODE") or "require"
            logger.info("Using RDS IAM auth for %s@%s:%s/%s", url.username, url.host, port, url.database)

            creator = _iam_connection_creator(
                host=url.host,
                port=port,
                user=url.username,
                database=url.database,
                region=region,
                sslmode=sslmode,
            )
            return create_engine("postgresql+psycopg2://", creator=creator, pool_pre_ping=True)

    return create_engine(database_url, pool_pre_ping=True)


def init_db(app: Flask) -> None:
    """Initialize database engine and per-request sessions."""

    engine = create_app_engine(str(app.config["DATABASE_URL"]))
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Tables are also created by scripts/create_tables.py; this is idempotent.
    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = getattr(g, "db", None)
        if session is None:
            return

        # Views commit explicitly; close discards anything left uncommitted.
        session.close()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session
