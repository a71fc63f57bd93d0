import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.models.display_settings import DisplaySettings
from eventwall.models.photo import Photo


def generate_slug(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "event"


async def is_referenced(db: AsyncSession, event_id: int) -> bool:
    """True once any photo or a display settings row points at the event."""
    photo = await db.execute(select(Photo.id).where(Photo.event_id == event_id).limit(1))
    if photo.first() is not None:
        return True
    ds = await db.execute(select(DisplaySettings.id).where(DisplaySettings.event_id == event_id).limit(1))
    return ds.first() is not None
