from merchflow.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, pg_enum
from merchflow.database.engine import async_session, engine, sync_engine
from merchflow.database.session import get_db

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "pg_enum",
    "async_session",
    "engine",
    "sync_engine",
    "get_db",
]
