"""
Database handle, table definitions and record types.

Accepts any SQLAlchemy URL (Postgres in production, SQLite for tests).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, ForeignKey, Index, String, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def utc_now() -> str:
    """Current instant as an ISO-8601 UTC string with fixed-width microseconds."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


@dataclass
class AreaRecord:
    id: str
    name: str
    description: Optional[str]
    created_at: str
    updated_at: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class SubAreaRecord:
    id: str
    name: str
    description: Optional[str]
    area_id: str
    created_at: str
    updated_at: str

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class BranchRecord:
    id: str
    name: str
    description: Optional[str]
    area_id: str
    sub_area_id: str
    created_at: str
    updated_at: str

    def as_dict(self) -> dict:
        return asdict(self)


class Database:
    """
    Shared, pool-backed storage handle.

    One instance lives on the application state and is handed to every
    repository; each operation opens its own short-lived session.
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        if not database_url:
            raise ValueError("DATABASE_URL is required")
        self.url = database_url
        self.engine = _build_engine(database_url, echo=echo)
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )

    def init_schema(self) -> None:
        """Create tables and indexes if they do not exist yet. Safe to repeat."""
        try:
            Base.metadata.create_all(self.engine)
        except Exception:
            logger.exception("Failed to create database tables")
            raise
        logger.info("Database tables created successfully")

    def dispose(self) -> None:
        self.engine.dispose()


def _build_engine(database_url: str, *, echo: bool) -> Engine:
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite:"):
        # Every thread must see the same in-memory database.
        kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, echo=echo, future=True, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


Base = declarative_base()


class AreaRow(Base):
    __tablename__ = "areas"
    __table_args__ = (Index("idx_areas_created_at", "created_at"),)

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)


class SubAreaRow(Base):
    __tablename__ = "sub_areas"
    __table_args__ = (
        Index("idx_sub_areas_area_id", "area_id"),
        Index("idx_sub_areas_created_at", "created_at"),
    )

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    area_id = Column(
        String, ForeignKey("areas.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)


class BranchRow(Base):
    __tablename__ = "branches"
    __table_args__ = (
        Index("idx_branches_area_id", "area_id"),
        Index("idx_branches_sub_area_id", "sub_area_id"),
        Index("idx_branches_created_at", "created_at"),
    )

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    area_id = Column(
        String, ForeignKey("areas.id", ondelete="CASCADE"), nullable=False
    )
    sub_area_id = Column(
        String, ForeignKey("sub_areas.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
