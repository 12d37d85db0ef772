import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Create an engine for the relational backend.
    pool_pre_ping: serverless invocations may pick up a connection that the
    server already closed.
    """
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(database_url, echo=echo, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session(session_factory: sessionmaker):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session(factory) as db:
            db.execute(text("SELECT * FROM applications"))
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection(engine: Engine) -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with engine.connect() as conn:
            row = conn.execute(text("SELECT 1 as test")).fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e.__class__.__name__)
        return False


# Table DDL per dialect. Column names are the snake_case form of the JSON fields.
SCHEMA_DDL = {
    "postgresql": [
        """
        CREATE TABLE IF NOT EXISTS applications (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            contact_info TEXT NOT NULL DEFAULT '',
            department TEXT NOT NULL,
            branch TEXT NOT NULL DEFAULT '',
            year TEXT NOT NULL DEFAULT '',
            experience TEXT NOT NULL DEFAULT '',
            resume_file_name TEXT,
            resume_file_content TEXT,
            resume_file_type TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS about_us (
            id TEXT PRIMARY KEY,
            content TEXT NOT NULL,
            updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
        """,
    ],
    "sqlite": [
        """
        CREATE TABLE IF NOT EXISTS applications (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            contact_info TEXT NOT NULL DEFAULT '',
            department TEXT NOT NULL,
            branch TEXT NOT NULL DEFAULT '',
            year TEXT NOT NULL DEFAULT '',
            experience TEXT NOT NULL DEFAULT '',
            resume_file_name TEXT,
            resume_file_content TEXT,
            resume_file_type TEXT,
            created_at TEXT NOT NULL
        )
        """,
        """
        CREATE TABLE IF NOT EXISTS about_us (
            id TEXT PRIMARY KEY,
            content TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """,
    ],
}


def init_schema(engine: Engine) -> None:
    """Create the applications and about_us tables if they are missing."""
    statements = SCHEMA_DDL.get(engine.dialect.name)
    if statements is None:
        raise RuntimeError(f"No schema for database dialect '{engine.dialect.name}'")

    with engine.begin() as conn:
        for stmt in statements:
            conn.execute(text(stmt))
    logger.info("Relational schema ready (%s)", engine.dialect.name)
