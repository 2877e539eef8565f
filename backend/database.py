"""Database setup and session management."""

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


@lru_cache
def get_engine():
    """Get or create the database engine (cached).

    The engine is the process-wide store handle: created on first use,
    disposed by the application lifespan at shutdown.
    """
    connect_args = {}
    database_url = settings.database_url

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        engine = create_engine(database_url, connect_args=connect_args, echo=False)
    else:
        engine = create_engine(
            database_url,
            echo=False,
            pool_pre_ping=True,
        )

    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def get_session_local():
    """Get a sessionmaker bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_session_factory():
    """Dependency that provides a sessionmaker for work outside the request session.

    Background price refreshes run after the response has been sent, when
    the request-scoped session from :func:`get_db` is already closed, so
    they open their own session from this factory.
    """
    return get_session_local()


def get_db():
    """Dependency that provides a database session.

    Services ``commit()`` their own writes; any exception raised while the
    session is in use rolls the transaction back.
    """
    SessionLocal = get_session_local()
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
