"""
Database configuration.
Engine, session management and health check for SQLModel.
"""
from sqlmodel import SQLModel, create_engine, Session, text
from sqlalchemy import event
from sqlalchemy.engine import Engine
from typing import Generator, Dict, Any
import logging

from app.config import settings


logger = logging.getLogger("hospital_admin.database")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Creates an engine with the connect args each backend needs."""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {}
    if is_sqlite:
        connect_args["check_same_thread"] = False

    new_engine = create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args
    )

    if is_sqlite:
        configure_sqlite_locking(new_engine)

    return new_engine


def configure_sqlite_locking(sqlite_engine: Engine) -> None:
    """
    Makes every SQLite transaction take the write lock when it begins.

    SQLite ignores SELECT ... FOR UPDATE. With BEGIN IMMEDIATE a second
    admit on the same bed waits for the first to commit and then reads
    the bed as occupied.
    """
    @event.listens_for(sqlite_engine, "connect")
    def disable_driver_transactions(dbapi_connection, connection_record):
        # Let SQLAlchemy emit BEGIN itself
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def begin_immediate(connection):
        connection.exec_driver_sql("BEGIN IMMEDIATE")


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)


def create_db_and_tables(bind: Engine = None) -> None:
    """
    Creates every table in the database.
    Called on application startup.
    """
    # Register all table models on the metadata
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session() -> Generator[Session, None, None]:
    """
    Session generator for FastAPI dependency injection.

    Usage:
        @router.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


def get_session_direct() -> Session:
    """
    Returns a plain session (not a generator).
    Used by scripts and startup seeding.

    The caller is responsible for closing the session.
    """
    return Session(engine)


def check_database_health() -> Dict[str, Any]:
    """Runs a trivial query to verify the database answers."""
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
        return {"status": "healthy"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": "database unreachable"}
