"""
Database engine and session management.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from wellness.constants import DATABASE_URL

logger = logging.getLogger("wellness.database")

engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    # Score fetches run on worker threads
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    engine_args.update({
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
    })

engine = create_engine(DATABASE_URL, **engine_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency: yields a database session and closes it after use."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory():
    """FastAPI dependency: the factory the score engine opens its own sessions from."""
    return SessionLocal


def init_db():
    """Create all tables that do not exist yet."""
    from wellness import models  # noqa: F401  registers models with Base

    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized")
