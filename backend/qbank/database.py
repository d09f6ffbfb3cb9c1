"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (local dev and tests).
One session per request via get_db; services receive the session as their first argument.
"""
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from qbank.config import settings
from qbank.services.slugs import slugify

logger = logging.getLogger(__name__)

_is_sqlite = settings.database_url.startswith("sqlite")
# sqlite:// and sqlite:///:memory: are per-connection; share one connection so tables survive
_is_memory = _is_sqlite and settings.database_url.rstrip("/") in ("sqlite:", "sqlite:///:memory:")

_engine_kwargs = {"echo": settings.sql_echo}
if _is_sqlite:
    _engine_kwargs["connect_args"] = {"check_same_thread": False}
    if _is_memory:
        _engine_kwargs["poolclass"] = StaticPool
else:
    _engine_kwargs["pool_pre_ping"] = True

engine = create_engine(settings.database_url, **_engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
Base = declarative_base()


if _is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores REFERENCES clauses unless enabled per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SEED_CATEGORIES = ["HTML", "CSS", "JavaScript"]


def init_db():
    """Create tables (SQLite only; use alembic upgrade head elsewhere) and seed categories when empty."""
    from qbank.models import Category, Question  # noqa: F401
    if _is_sqlite:
        Base.metadata.create_all(bind=engine)
    if not settings.seed_categories:
        return
    db = SessionLocal()
    try:
        if db.query(Category).count() == 0:
            for title in SEED_CATEGORIES:
                db.add(Category(title=title, slug=slugify(title)))
            db.commit()
            logger.info("Seeded %s categories", len(SEED_CATEGORIES))
    finally:
        db.close()


def get_db():
    """Dependency: yield a DB session, roll back on error, close after request."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
