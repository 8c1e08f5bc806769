import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from app.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def init_db():
    """Create all tables"""
    from app.models import delivery, match  # noqa
    Base.metadata.create_all(bind=engine)


def connect_db() -> bool:
    """
    Create tables at startup. A failure is logged and reported, not raised,
    so the process still starts.
    """
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error("Failed to connect to database: %s", e)
        return False
    logger.info("Connected to database at %s", engine.url.render_as_string(hide_password=True))
    return True


def get_session():
    """Get a database session - for direct use (caller must close)"""
    return SessionLocal()


def get_db():
    """FastAPI dependency - yields session and closes after request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
