import logging

from fastapi import APIRouter, Depends
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.database import get_db
from eventwall.dependencies import verify_api_key
from eventwall.models.analytics import Analytics
from eventwall.models.event import Event
from eventwall.schemas.event import EventCreate, EventResponse, EventUpdate
from eventwall.services.events import generate_slug, is_referenced
from eventwall.utils.exceptions import ConflictError, NotFoundError
from eventwall.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])

_admin = [Depends(verify_api_key)]


async def _slug_taken(db: AsyncSession, slug: str, exclude_id: int | None = None) -> bool:
    query = select(Event.id).where(Event.slug == slug)
    if exclude_id is not None:
        query = query.where(Event.id != exclude_id)
    result = await db.execute(query.limit(1))
    return result.first() is not None


async def _unique_slug(db: AsyncSession, name: str) -> str:
    base = generate_slug(name)
    slug, n = base, 2
    while await _slug_taken(db, slug):
        slug = f"{base}-{n}"
        n += 1
    return slug


async def _get_event(db: AsyncSession, event_id: int) -> Event:
    event = await db.get(Event, event_id)
    if not event:
        raise NotFoundError("Event not found")
    return event


@router.get("")
async def list_events(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Event).order_by(Event.id))
    data = [EventResponse.model_validate(e) for e in result.scalars().all()]
    return success_response(data=data)


@router.get("/slug/{slug}")
async def get_event_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Event).where(Event.slug == slug))
    event = result.scalars().first()
    if not event:
        raise NotFoundError(f"Event '{slug}' not found")
    return success_response(data=EventResponse.model_validate(event))


@router.get("/{event_id}")
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    event = await _get_event(db, event_id)
    return success_response(data=EventResponse.model_validate(event))


@router.post("", status_code=201, dependencies=_admin)
async def create_event(payload: EventCreate, db: AsyncSession = Depends(get_db)):
    if payload.slug:
        if await _slug_taken(db, payload.slug):
            raise ConflictError(f"Slug '{payload.slug}' is already in use")
        slug = payload.slug
    else:
        slug = await _unique_slug(db, payload.name)

    event = Event(**payload.model_dump(exclude={"slug"}), slug=slug)
    db.add(event)
    await db.commit()
    await db.refresh(event)

    logger.info("Created event %s (%s)", event.id, event.slug)
    return success_response(data=EventResponse.model_validate(event))


@router.put("/{event_id}", dependencies=_admin)
async def update_event(event_id: int, payload: EventUpdate, db: AsyncSession = Depends(get_db)):
    event = await _get_event(db, event_id)
    changes = payload.model_dump(exclude_unset=True)

    new_slug = changes.get("slug")
    if new_slug is not None and new_slug != event.slug:
        if await is_referenced(db, event.id):
            raise ConflictError("Slug cannot change once the event has photos or settings")
        if await _slug_taken(db, new_slug, exclude_id=event.id):
            raise ConflictError(f"Slug '{new_slug}' is already in use")

    for key, value in changes.items():
        if value is None and key in ("name", "slug", "is_active"):
            continue
        setattr(event, key, value)

    await db.commit()
    await db.refresh(event)
    return success_response(data=EventResponse.model_validate(event))


@router.delete("/{event_id}", dependencies=_admin)
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db)):
    event = await _get_event(db, event_id)
    if await is_referenced(db, event.id):
        raise ConflictError("Event still has photos or display settings")

    await db.execute(delete(Analytics).where(Analytics.event_id == event.id))
    await db.delete(event)
    await db.commit()

    logger.info("Deleted event %s", event_id)
    return success_response(message="Event deleted")
