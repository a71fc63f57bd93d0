import logging

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from eventwall.models.analytics import Analytics
from eventwall.models.photo import Photo
from eventwall.utils.timestamps import today_key

logger = logging.getLogger(__name__)

COUNTER_FIELDS = ("uploads", "views", "qr_scans", "approved", "rejected", "archived")


async def _ensure_daily(db: AsyncSession, event_id: int, day: str) -> None:
    # concurrent first requests of the day race here; the unique key settles it
    insert = pg_insert if db.get_bind().dialect.name == "postgresql" else sqlite_insert
    await db.execute(
        insert(Analytics)
        .values(
            event_id=event_id, date=day,
            uploads=0, views=0, qr_scans=0, approved=0, rejected=0, archived=0,
        )
        .on_conflict_do_nothing(index_elements=["event_id", "date"])
    )


async def get_daily(db: AsyncSession, event_id: int) -> Analytics:
    """Today's counter row for an event, created on first use."""
    day = today_key()
    await _ensure_daily(db, event_id, day)
    result = await db.execute(
        select(Analytics)
        .where(Analytics.event_id == event_id, Analytics.date == day)
        .execution_options(populate_existing=True)
    )
    return result.scalars().one()


async def increment(db: AsyncSession, event_id: int, field: str, amount: int = 1) -> None:
    """Bump a counter in place; the caller commits."""
    if field not in COUNTER_FIELDS:
        raise ValueError(f"Unknown analytics counter: {field}")
    day = today_key()
    await _ensure_daily(db, event_id, day)
    column = getattr(Analytics, field)
    await db.execute(
        update(Analytics)
        .where(Analytics.event_id == event_id, Analytics.date == day)
        .values({column: column + amount})
        .execution_options(synchronize_session=False)
    )


async def status_counts(db: AsyncSession, event_id: int) -> dict[str, int]:
    result = await db.execute(
        select(Photo.status, func.count(Photo.id))
        .where(Photo.event_id == event_id)
        .group_by(Photo.status)
    )
    counts = {"pending": 0, "approved": 0, "rejected": 0, "archived": 0}
    for status, count in result.all():
        counts[status] = count
    return counts
