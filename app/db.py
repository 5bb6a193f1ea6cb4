import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings

log = logging.getLogger(__name__)
settings = get_settings()

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# Create the SQLAlchemy engine (the process-wide connection pool)
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    # route handlers run in a threadpool, so sqlite connections cross threads
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)

if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def init_db() -> None:
    """Check the pool can hand out a working connection. Called on startup."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    log.info("database ready (dialect=%s)", engine.dialect.name)

def close_db() -> None:
    """Close pooled connections. Checked-out connections are closed when returned."""
    engine.dispose()
    log.info("database pool disposed")

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
