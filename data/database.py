"""
Database - Engine, session factory and table definitions
========================================================
All bot data lives in one relational database (MariaDB in production).
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text, create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

import config
from errors import StorageError

logger = logging.getLogger(__name__)

Base = declarative_base()


class UserStateRow(Base):
    __tablename__ = "user_states"

    user_id = Column(BigInteger, primary_key=True, autoincrement=False)
    state = Column(Text, nullable=False)


class DepartmentMemberRow(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chat_id = Column(BigInteger, nullable=False, index=True)
    department = Column(String(100), nullable=False, index=True)


class MarketingMemberRow(Base):
    __tablename__ = "marketing_team"

    username = Column(String(64), primary_key=True)


class UserChatRow(Base):
    __tablename__ = "user_chats"

    username = Column(String(64), primary_key=True)
    chat_id = Column(BigInteger, nullable=False)


class EventRow(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_name = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=False)
    company_tin = Column(String(64))
    contact_number = Column(String(64), nullable=False)
    event_name = Column(String(255), nullable=False)
    event_date = Column(String(10), nullable=False)
    event_time = Column(String(32))
    participants = Column(String(32), nullable=False)
    location = Column(String(255))
    duration = Column(String(64))
    services = Column(Text)
    created_at = Column(DateTime, nullable=False)


def build_url() -> URL | str:
    """SQLAlchemy URL from DATABASE_URL or the DB_* settings."""
    if config.DATABASE_URL:
        return config.DATABASE_URL
    return URL.create(
        "mysql+pymysql",
        username=config.DB_USER,
        password=config.DB_PASSWORD,
        host=config.DB_HOST,
        port=config.DB_PORT,
        database=config.DB_DATABASE,
    )


class Database:
    """Owns the connection pool and hands out sessions."""

    def __init__(self, url: Optional[URL | str] = None):
        url = url or build_url()
        options = {"pool_pre_ping": True}
        if str(url).startswith("sqlite"):
            # SQLite connections are shared across the bot's threads
            options["connect_args"] = {"check_same_thread": False}
            if make_url(url).database in (None, "", ":memory:"):
                # One shared connection, or each thread would see its own empty database
                options["poolclass"] = StaticPool
        else:
            options["pool_size"] = config.DB_CONNECTION_LIMIT
            options["max_overflow"] = 0
            options["connect_args"] = {"connect_timeout": config.DB_CONNECT_TIMEOUT}
        self.engine = create_engine(url, **options)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_tables(self):
        """Create any missing tables."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not create tables: {e}") from e
        logger.info("Database tables ready")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Transactional session; database failures surface as StorageError."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error: {e}")
            raise StorageError(str(e)) from e
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()
