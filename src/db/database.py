from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import OperationalError
from .models import Base
from core.config import Config
import logging

logger = logging.getLogger(__name__)


def _engine_kwargs(database_url: str) -> dict:
    """Connection settings per backend: pooled keepalives for Postgres, thread-shared SQLite."""
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_pre_ping": True,  # Test connections before using them
        "pool_recycle": 3600,   # Recycle connections after 1 hour
        "pool_size": 10,        # Connection pool size
        "max_overflow": 20,     # Max overflow connections
        "connect_args": {
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        },
    }


DATABASE_URL = Config.DATABASE_URL

if Config.is_sqlite():
    logger.info("Using SQLite database at %s", DATABASE_URL)

engine = create_engine(
    DATABASE_URL,
    echo=Config.SQL_ECHO,  # Set SQL_ECHO=true to see SQL queries in logs
    future=True,
    **_engine_kwargs(DATABASE_URL)
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Dependency function for FastAPI.
    Yields a database session and ensures it's closed after use.

    Usage in FastAPI:
        @router.get("/clients")
        def list_clients(db: Session = Depends(get_db)):
            return db.query(Client).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        try:
            db.close()
        except OperationalError as e:
            # Handle SSL connection closed errors during cleanup
            if "SSL connection has been closed unexpectedly" in str(e):
                logger.warning("Database connection already closed during cleanup (SSL timeout).")
            else:
                raise


def init_db():
    """
    Initialize the database by creating all tables.
    Safe to call on every startup; existing tables are left untouched.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured: %s", ", ".join(Base.metadata.tables.keys()))
