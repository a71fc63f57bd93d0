from fastapi import Depends, Header, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.config import settings
from eventwall.database import get_db
from eventwall.models.event import Event
from eventwall.utils.exceptions import AppException, NotFoundError


async def verify_api_key(x_api_key: str = Header(default="")) -> None:
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise AppException("Invalid or missing API key", status_code=403)


async def resolve_event(db: AsyncSession, slug: str | None) -> Event:
    """Resolve the event a request is scoped to.

    An explicit slug must exist. Without one, the configured default event is
    used, falling back to the first active event.
    """
    if slug:
        result = await db.execute(select(Event).where(Event.slug == slug))
        event = result.scalars().first()
        if event is None:
            raise NotFoundError(f"Event '{slug}' not found")
        return event

    result = await db.execute(select(Event).where(Event.slug == settings.default_event_slug))
    event = result.scalars().first()
    if event is not None:
        return event

    result = await db.execute(select(Event).where(Event.is_active.is_(True)).order_by(Event.id).limit(1))
    event = result.scalars().first()
    if event is None:
        raise NotFoundError("No active event")
    return event


async def get_current_event(
    event: str | None = Query(default=None, description="Event slug"),
    db: AsyncSession = Depends(get_db),
) -> Event:
    return await resolve_event(db, event)
