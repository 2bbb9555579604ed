"""Async engine, session factory and the per-request session dependency."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from restapi_tutor.core.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign keys switched on."""
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request from the app's engine (see main.create_app)."""
    async with request.app.state.session_factory() as db:
        yield db


@asynccontextmanager
async def storage_errors(db: AsyncSession) -> AsyncIterator[None]:
    """Roll back and raise StorageError for any database failure inside the block."""
    try:
        yield
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Storage operation failed")
        raise StorageError() from exc


async def commit_or_raise(db: AsyncSession, conflict_message: str) -> None:
    """Commit; map constraint violations to ConflictError, anything else to StorageError."""
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.info("Commit rejected by constraint: %s", exc.orig)
        raise ConflictError(conflict_message) from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Commit failed")
        raise StorageError() from exc
