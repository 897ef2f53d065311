"""
Database probe
One-shot MySQL connectivity check used by /db-check
"""
import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from version_app.config import Settings

logger = logging.getLogger(__name__)

SOCK_TABLE = "sock"


class DatabaseCheckError(Exception):
    """Raised when the database cannot be reached or queried"""


def build_database_url(settings: Settings) -> URL:
    """mysql+pymysql URL from the DB_* settings"""
    return URL.create(
        "mysql+pymysql",
        username=settings.DB_USER,
        password=settings.DB_PASSWORD,
        host=settings.DB_HOST,
        port=int(settings.DB_PORT),
        database=settings.DB_NAME,
    )


def connect_timeout(settings: Settings) -> Optional[int]:
    """DB_CONNECT_TIMEOUT in seconds, None when unset or malformed"""
    raw = settings.DB_CONNECT_TIMEOUT
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring malformed DB_CONNECT_TIMEOUT %r", raw)
        return None


def count_socks(settings: Settings) -> int:
    """
    Open a fresh connection, ping it and count the rows in the sock table.
    The connection and its engine are always released before returning.
    """
    connect_args = {}
    timeout = connect_timeout(settings)
    if timeout is not None:
        connect_args["connect_timeout"] = timeout

    try:
        engine = create_engine(
            build_database_url(settings),
            poolclass=NullPool,
            connect_args=connect_args,
        )
    except (SQLAlchemyError, ValueError) as e:
        raise DatabaseCheckError(f"Failed to connect to database: {e}") from e

    try:
        try:
            conn = engine.connect()
        except SQLAlchemyError as e:
            raise DatabaseCheckError(f"Failed to connect to database: {e}") from e

        with conn:
            try:
                conn.execute(text("SELECT 1"))
            except SQLAlchemyError as e:
                raise DatabaseCheckError(f"Failed to ping database: {e}") from e

            try:
                count = conn.execute(text(f"SELECT COUNT(*) FROM {SOCK_TABLE}")).scalar_one()
            except SQLAlchemyError as e:
                raise DatabaseCheckError(f"Failed to query database: {e}") from e
    finally:
        engine.dispose()

    logger.debug("Database %s reports %s socks", settings.db_target, count)
    return int(count)
