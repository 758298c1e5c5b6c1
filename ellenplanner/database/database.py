"""Engine, session factory and schema bootstrap for the ellenplanner stores.

SQLite is the default so the scheduler runs without any setup; point
`DATABASE_URL` at PostgreSQL for a shared planning database.
"""

import logging
import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ellenplanner.db")


def _is_sqlite_url(database_url: str) -> bool:
    return (database_url or "").startswith("sqlite")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "False").lower() == "true"


def get_engine_kwargs(database_url: str) -> dict:
    """Keyword arguments for `create_engine`, derived from the URL and env."""
    kwargs: dict = {"echo": _env_flag("DEBUG"), "pool_pre_ping": True}

    if _is_sqlite_url(database_url):
        # Request handlers run in a threadpool; one connection may cross threads.
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs

    kwargs.update(
        pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "5")),
        pool_timeout=int(os.getenv("DB_POOL_TIMEOUT_SEC", "30")),
    )
    return kwargs


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    # Blocks reference projects and phases; SQLite ignores FKs unless asked.
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    built = create_engine(database_url, **get_engine_kwargs(database_url))
    if _is_sqlite_url(database_url):
        event.listen(built, "connect", _enable_sqlite_foreign_keys)
    return built


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Session:
    """Request-scoped session (FastAPI dependency)."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create the planning tables.

    With `RUN_MIGRATIONS=true` on a non-SQLite database the Alembic revisions
    are applied instead of `create_all()`.
    """
    from ellenplanner.database import models  # noqa: F401

    if _env_flag("RUN_MIGRATIONS") and not _is_sqlite_url(DATABASE_URL):
        from alembic import command
        from alembic.config import Config

        logger.info("Applying Alembic migrations")
        alembic_cfg = Config(os.getenv("ALEMBIC_INI", "alembic.ini"))
        alembic_cfg.set_main_option("sqlalchemy.url", DATABASE_URL)
        command.upgrade(alembic_cfg, "head")
        return

    logger.info(f"Creating tables on {engine.url.get_backend_name()}")
    Base.metadata.create_all(bind=engine)
