from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.engine import async_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields a database session.

    The whole request runs in one transaction: it is committed when the
    handler returns and rolled back if anything raises, so multi-row writes
    such as an order plus its item land together or not at all.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
