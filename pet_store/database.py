from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.pool import QueuePool
import contextlib
import logging

from .core.config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_url: str, **engine_kwargs):
    """Build an engine for ``db_url``.

    SQLite engines are made usable across FastAPI's worker threads and
    get foreign key enforcement; every other backend gets a ``QueuePool``
    sized from settings unless the caller passes its own pool options.
    """
    if db_url.startswith("sqlite"):
        engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(db_url, **engine_kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    engine_kwargs.setdefault("poolclass", QueuePool)
    engine_kwargs.setdefault("pool_size", settings.DB_POOL_SIZE)  # Number of connections to keep open
    engine_kwargs.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
    engine_kwargs.setdefault("pool_timeout", settings.DB_POOL_TIMEOUT)
    engine_kwargs.setdefault("pool_recycle", settings.DB_POOL_RECYCLE)
    engine_kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using them from the pool
    return create_engine(db_url, **engine_kwargs)


DB_URL = settings.DATABASE_URL
write_engine = create_db_engine(DB_URL)
# Read engine gets a larger pool on backends that pool
read_engine = create_db_engine(
    DB_URL,
    **({} if DB_URL.startswith("sqlite") else {
        "pool_size": settings.DB_POOL_SIZE * 2,
        "max_overflow": settings.DB_MAX_OVERFLOW * 2,
    })
)


def create_db_and_tables(bind=None):
    # Only create tables using the write engine
    SQLModel.metadata.create_all(bind or write_engine)
    logger.info("Database tables created.")


# Session for write operations
def get_write_session():
    with Session(write_engine) as session:
        yield session


# Session for read operations
def get_read_session():
    with Session(read_engine) as session:
        yield session


@contextlib.contextmanager
def transaction(session: Session):
    """Commit everything done inside the block, or nothing at all."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
