import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from app.models.base import Base
from app.models import entities  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


async def initialize_database(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready | dialect=%s", engine.dialect.name)
