from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.config import settings
from eventwall.database import get_db
from eventwall.dependencies import get_current_event, verify_api_key
from eventwall.models.analytics import Analytics
from eventwall.models.event import Event
from eventwall.schemas.analytics import AnalyticsResponse, StatsResponse
from eventwall.services import analytics
from eventwall.utils.exceptions import NotFoundError
from eventwall.utils.response import success_response

router = APIRouter(tags=["analytics"])

QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/?size=200x200&data="


@router.get("/stats")
async def get_stats(
    event: Event = Depends(get_current_event),
    db: AsyncSession = Depends(get_db),
):
    await analytics.increment(db, event.id, "views")
    today = await analytics.get_daily(db, event.id)
    counts = await analytics.status_counts(db, event.id)
    await db.commit()

    stats = StatsResponse(
        uploads=today.uploads,
        views=today.views,
        qr_scans=today.qr_scans,
        total_uploads=sum(counts.values()),
        **counts,
    )
    return success_response(data=stats)


@router.get("/qrcode")
async def get_qrcode(request: Request, event: str | None = Query(default=None)):
    base = settings.public_base_url or str(request.base_url)
    upload_url = f"{base.rstrip('/')}/upload"
    if event:
        upload_url += f"?event={quote(event)}"
    return success_response(data={
        "uploadUrl": upload_url,
        "qrCodeUrl": QR_SERVICE_URL + quote(upload_url, safe=""),
    })


@router.post("/events/{event_id}/analytics/qr-scan")
async def record_qr_scan(event_id: int, db: AsyncSession = Depends(get_db)):
    if not await db.get(Event, event_id):
        raise NotFoundError("Event not found")
    await analytics.increment(db, event_id, "qr_scans")
    await db.commit()
    return success_response(message="QR scan recorded")


@router.get("/events/{event_id}/analytics", dependencies=[Depends(verify_api_key)])
async def list_analytics(
    event_id: int,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
):
    if not await db.get(Event, event_id):
        raise NotFoundError("Event not found")

    query = select(Analytics).where(Analytics.event_id == event_id)
    if start_date:
        query = query.where(Analytics.date >= start_date[:10])
    if end_date:
        query = query.where(Analytics.date <= end_date[:10])
    result = await db.execute(query.order_by(Analytics.date))
    data = [AnalyticsResponse.model_validate(row) for row in result.scalars().all()]
    return success_response(data=data)
