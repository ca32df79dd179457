"""Engine, session factory and unit-of-work helpers."""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from ridecatalog.config import settings
from ridecatalog.errors import StoreError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(url: str, pool_size: int = 5):
    """Create an engine; SQLite gets thread-sharing, servers get a bounded pool."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_size=pool_size, max_overflow=0, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, settings.DB_POOL_SIZE)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    """Request-scoped session, released even when the handler raises."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block, or roll all of it back.

    Domain errors raised inside the block propagate unchanged after the
    rollback; SQLAlchemy failures are logged and re-raised as StoreError.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store operation failed, transaction rolled back")
        raise StoreError() from exc
    except Exception:
        db.rollback()
        raise
