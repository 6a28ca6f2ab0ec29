"""Database session management and schema bootstrap"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from rentatool.config import settings
from rentatool.infrastructure.database.models import Base
from rentatool.infrastructure.database.repositories import seed_default_tools


def build_engine(database_url: str) -> Engine:
    """SQLite needs cross-thread access for FastAPI's threadpool; other backends get pooling"""
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=10,
        max_overflow=10,
        pool_recycle=3600,
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create tables and, if configured, load the default tool inventory"""
    Base.metadata.create_all(bind=bind)
    if settings.seed_default_tools:
        db = sessionmaker(autocommit=False, autoflush=False, bind=bind)()
        try:
            seed_default_tools(db)
            db.commit()
        finally:
            db.close()


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
