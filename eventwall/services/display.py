import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.models.display_settings import DisplaySettings
from eventwall.models.photo import Photo
from eventwall.schemas.display_settings import DisplaySettingsFields, DisplaySettingsResponse
from eventwall.schemas.photo import DisplayImage

logger = logging.getLogger(__name__)


async def get_settings_row(db: AsyncSession, event_id: int) -> DisplaySettings | None:
    result = await db.execute(select(DisplaySettings).where(DisplaySettings.event_id == event_id))
    return result.scalars().first()


async def load_settings(db: AsyncSession, event_id: int) -> DisplaySettingsResponse:
    """Stored settings for the event, or unsaved defaults."""
    row = await get_settings_row(db, event_id)
    if row is None:
        return DisplaySettingsResponse(event_id=event_id)
    return DisplaySettingsResponse.model_validate(row)


async def upsert_settings(db: AsyncSession, event_id: int, values: dict) -> DisplaySettings:
    row = await get_settings_row(db, event_id)
    if row is None:
        row = DisplaySettings(event_id=event_id, **values)
        db.add(row)
    else:
        for key, value in values.items():
            setattr(row, key, value)
    await db.commit()
    await db.refresh(row)
    return row


async def set_settings_image(db: AsyncSession, event_id: int, field: str, path: str) -> DisplaySettings:
    row = await get_settings_row(db, event_id)
    if row is None:
        defaults = DisplaySettingsFields().model_dump()
        defaults[field] = path
        return await upsert_settings(db, event_id, defaults)
    return await upsert_settings(db, event_id, {field: path})


def is_blacklisted(photo: Photo, words: list[str]) -> bool:
    if not words:
        return False
    haystack = f"{photo.submitter_name or ''} {photo.caption or ''}".lower()
    return any(word in haystack for word in words)


async def display_images(db: AsyncSession, event_id: int) -> list[DisplayImage]:
    """Approved photos in rotation order: display order (unset last), then newest first."""
    result = await db.execute(
        select(Photo)
        .where(Photo.event_id == event_id, Photo.status == "approved")
        .order_by(
            Photo.display_order.is_(None),
            Photo.display_order,
            Photo.created_at.desc(),
            Photo.id.desc(),
        )
    )
    photos = result.scalars().all()

    settings = await load_settings(db, event_id)
    words = settings.blacklist()

    images = []
    for photo in photos:
        if is_blacklisted(photo, words):
            logger.debug("Photo %s skipped by blacklist", photo.id)
            continue
        images.append(DisplayImage(
            id=photo.id,
            original_path=photo.original_path,
            submitter_name=photo.submitter_name or "Anonymous",
            caption=photo.caption,
            display_order=photo.display_order,
            created_at=photo.created_at,
        ))
    return images
