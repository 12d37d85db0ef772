"""
Database module - relational (SQLAlchemy) and MongoDB connections.
"""
from portal.db.postgres import get_db_session, init_schema, make_engine, make_session_factory
from portal.db.mongodb import get_collection

__all__ = [
    "get_db_session",
    "init_schema",
    "make_engine",
    "make_session_factory",
    "get_collection"
]
