"""Write helpers that surface store failures as PersistenceError."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import PersistenceError

logger = structlog.get_logger()


@asynccontextmanager
async def unit_of_work(
    session: AsyncSession, operation: str, **context
) -> AsyncIterator[AsyncSession]:
    """Stage writes inside the block and commit them once on exit.

    Any exception raised while staging or committing rolls the session back,
    so nothing added inside the block survives and the session stays usable.
    Store errors are re-raised as PersistenceError; anything else propagates
    unchanged.
    """
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("persist_failed", operation=operation, error=str(exc), **context)
        raise PersistenceError(str(exc)) from exc
    except Exception as exc:
        await session.rollback()
        logger.error("persist_aborted", operation=operation, error=str(exc), **context)
        raise

