import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from app.core.config import settings

logger = logging.getLogger(__name__)


# -----------------------
# SQLAlchemy engine
# -----------------------
def set_timezone(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("SET timezone = %s", (settings.timezone,))
    cursor.close()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine configured for the backend named in the URL."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

        # SQLite ignores foreign keys unless asked on every connection
        @event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    engine = create_engine(
        database_url,
        echo=echo,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        connect_args={"connect_timeout": 5},
    )

    event.listen(engine, "connect", set_timezone)
    return engine


engine = build_engine(settings.database_url, echo=settings.db_echo)

# -----------------------
# Session and Base
# -----------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# -----------------------
# Test connection
# -----------------------
def check_connection() -> None:
    logger.info(f"Connecting to database: {settings.safe_database_url}")
    try:
        with engine.connect():
            logger.info("Database connection successful ✅")
    except Exception as e:
        logger.error(f"Failed to connect to database ❌: {str(e)}")
        raise


def init_db() -> None:
    """Create all tables for the registered models."""
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("✓ Database tables created successfully")


# -----------------------
# Session dependency
# -----------------------
def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Database error occurred: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()
