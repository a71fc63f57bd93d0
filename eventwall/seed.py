import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.config import settings
from eventwall.models.event import Event

logger = logging.getLogger(__name__)


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Event).limit(1))
    if result.scalars().first() is not None:
        return

    session.add(Event(
        name=settings.default_event_name,
        slug=settings.default_event_slug,
        is_active=True,
    ))
    await session.commit()
    logger.info("Seeded default event '%s'", settings.default_event_slug)
