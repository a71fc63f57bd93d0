import logging

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.database import get_db
from eventwall.dependencies import get_current_event, verify_api_key
from eventwall.models.event import Event
from eventwall.schemas.display_settings import DisplaySettingsPayload, DisplaySettingsResponse
from eventwall.services import display
from eventwall.services.images import BACKGROUND_PROFILE, LOGO_PROFILE, store_upload
from eventwall.utils.exceptions import NotFoundError
from eventwall.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["display"])

_admin = [Depends(verify_api_key)]


def _settings_json(row) -> dict:
    return DisplaySettingsResponse.model_validate(row).to_json()


@router.get("/display/images")
async def display_images(
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    images = await display.display_images(db, event.id)
    return success_response(data=images)


@router.get("/display-settings")
async def get_display_settings(
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    current = await display.load_settings(db, event.id)
    return success_response(data=current)


@router.post("/display-settings", dependencies=_admin)
async def save_display_settings(payload: DisplaySettingsPayload, db: AsyncSession = Depends(get_db)):
    if not await db.get(Event, payload.event_id):
        raise NotFoundError("Event not found")

    values = payload.model_dump(exclude={"event_id"})
    row = await display.upsert_settings(db, payload.event_id, values)

    logger.info("Display settings saved for event %s", payload.event_id)
    return success_response(data=_settings_json(row))


@router.post("/display-settings/background", dependencies=_admin)
async def upload_background(
    image: UploadFile = File(...),
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    path = await store_upload(image, BACKGROUND_PROFILE)
    row = await display.set_settings_image(db, event.id, "background_path", path)
    return success_response(data=_settings_json(row))


@router.post("/display-settings/logo", dependencies=_admin)
async def upload_logo(
    image: UploadFile = File(...),
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    path = await store_upload(image, LOGO_PROFILE)
    row = await display.set_settings_image(db, event.id, "logo_path", path)
    return success_response(data=_settings_json(row))
