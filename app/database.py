import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator
from app.core.logging_config import logger

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(value: datetime) -> str:
    """Render a datetime as fixed-width RFC 3339 text in UTC.

    Fixed microsecond precision keeps text ordering equal to time ordering.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def parse_timestamp(value) -> datetime:
    """Parse stored timestamp text, falling back to the epoch when malformed."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        logger.warning(f"Malformed stored timestamp {value!r}, using epoch")
        return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class TextTimestamp(TypeDecorator):
    """Timezone-aware datetime persisted as RFC 3339 text."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            return value
        return format_timestamp(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return parse_timestamp(value)


class Base(DeclarativeBase):
    pass

class TimestampMixin:
    created_at = Column(TextTimestamp, default=utc_now, nullable=False)


def create_db_engine(database_url: str) -> Engine:
    """
    Build the engine behind the store.
    
    SQLite gets one shared connection (StaticPool) so that every statement
    goes through a single handle; other databases keep a regular pool.
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
            future=True,
        )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,      # Test connections before using
        pool_size=10,            # Base connection pool size
        max_overflow=20,         # Max connections beyond pool_size
        pool_timeout=30,         # Timeout for getting connection (seconds)
        pool_recycle=3600,       # Recycle connections after 1 hour
        echo=False,
        future=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    # Rows outlive their session, so attributes must stay loaded after commit
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
        future=True,
    )
