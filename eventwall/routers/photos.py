import logging
import os

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.config import settings
from eventwall.database import get_db
from eventwall.dependencies import get_current_event, resolve_event, verify_api_key
from eventwall.models.event import Event
from eventwall.models.photo import Photo
from eventwall.schemas.photo import (
    MAX_CAPTION_LENGTH,
    ModerationRequest,
    PhotoDisplayOrder,
    PhotoResponse,
    PhotoStatus,
    ReorderRequest,
)
from eventwall.services import analytics
from eventwall.services.images import PHOTO_PROFILE, UPLOAD_URL_PREFIX, store_upload
from eventwall.services.moderation import next_status
from eventwall.utils.exceptions import AppException, NotFoundError
from eventwall.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/photos", tags=["photos"])

_admin = [Depends(verify_api_key)]


def _photo_json(photo: Photo) -> dict:
    return PhotoResponse.model_validate(photo).to_json()


def _discard(paths: list[str]) -> None:
    for path in paths:
        name = path.removeprefix(f"{UPLOAD_URL_PREFIX}/")
        try:
            os.remove(os.path.join(settings.upload_dir, name))
        except FileNotFoundError:
            pass


@router.get("")
async def list_photos(
    status: PhotoStatus | None = Query(default=None),
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    query = select(Photo).where(Photo.event_id == event.id)
    if status:
        query = query.where(Photo.status == status)
    result = await db.execute(query.order_by(Photo.created_at.desc(), Photo.id.desc()))
    return success_response(data=[_photo_json(p) for p in result.scalars().all()])


@router.get("/recent")
async def recent_photos(
    limit: int = Query(default=6, ge=1, le=100),
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Photo)
        .where(Photo.event_id == event.id)
        .order_by(Photo.created_at.desc(), Photo.id.desc())
        .limit(limit)
    )
    return success_response(data=[_photo_json(p) for p in result.scalars().all()])


@router.get("/{photo_id}")
async def get_photo(photo_id: int, db: AsyncSession = Depends(get_db)):
    photo = await db.get(Photo, photo_id)
    if not photo:
        raise NotFoundError("Photo not found")
    return success_response(data=_photo_json(photo))


@router.post("/upload", status_code=201)
async def upload_photos(
    photos: list[UploadFile] = File(...),
    submitter_name: str | None = Form(default=None, alias="submitterName"),
    caption: str | None = Form(default=None, alias="caption", max_length=MAX_CAPTION_LENGTH),
    event_id: int | None = Form(default=None, alias="eventId"),
    event: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    if not 1 <= len(photos) <= settings.max_files_per_upload:
        raise AppException(f"Upload between 1 and {settings.max_files_per_upload} photos")

    if event_id is not None:
        target = await db.get(Event, event_id)
        if not target:
            raise NotFoundError("Event not found")
    else:
        target = await resolve_event(db, event)

    # Every file is validated before any row is written
    stored: list[str] = []
    try:
        for upload in photos:
            stored.append(await store_upload(upload, PHOTO_PROFILE))
    except AppException:
        _discard(stored)
        raise

    created = []
    try:
        for path in stored:
            photo = Photo(
                event_id=target.id,
                original_path=path,
                submitter_name=(submitter_name or "").strip() or None,
                caption=(caption or "").strip() or None,
                status="pending",
            )
            db.add(photo)
            created.append(photo)

        await analytics.increment(db, target.id, "uploads", len(created))
        await db.commit()
    except Exception:
        await db.rollback()
        _discard(stored)
        raise

    for photo in created:
        await db.refresh(photo)

    logger.info("Event %s received %d photo(s)", target.slug, len(created))
    return success_response(data=[_photo_json(p) for p in created], message="Photos uploaded")


@router.post("/moderate", dependencies=_admin)
async def moderate_photo(payload: ModerationRequest, db: AsyncSession = Depends(get_db)):
    photo = await db.get(Photo, payload.photo_id)
    if not photo:
        raise NotFoundError("Photo not found")

    previous = photo.status
    photo.status = next_status(previous, payload.action)
    await analytics.increment(db, photo.event_id, photo.status)
    await db.commit()
    await db.refresh(photo)

    logger.info("Photo %s moderated: %s -> %s", photo.id, previous, photo.status)
    return success_response(data=_photo_json(photo))


@router.post("/display-order", dependencies=_admin)
async def set_display_order(payload: PhotoDisplayOrder, db: AsyncSession = Depends(get_db)):
    photo = await db.get(Photo, payload.photo_id)
    if not photo:
        raise NotFoundError("Photo not found")

    photo.display_order = payload.display_order
    await db.commit()
    await db.refresh(photo)
    return success_response(data=_photo_json(photo))


@router.post("/reorder", dependencies=_admin)
async def reorder_photos(payload: ReorderRequest, db: AsyncSession = Depends(get_db)):
    updated = []
    for item in payload.photo_orders:
        photo = await db.get(Photo, item.photo_id)
        if not photo:
            logger.warning("Reorder skipped unknown photo %s", item.photo_id)
            continue
        photo.display_order = item.display_order
        updated.append(photo)

    await db.commit()
    for photo in updated:
        await db.refresh(photo)
    return success_response(data=[_photo_json(p) for p in updated])
