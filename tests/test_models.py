import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from eventwall.database import Base
from eventwall.models import Analytics, DisplaySettings, Event, Photo, User


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
    await engine.dispose()


async def _event(db_session, slug="launch-party"):
    event = Event(name="Launch Party", slug=slug)
    db_session.add(event)
    await db_session.commit()
    return event


@pytest.mark.asyncio
async def test_create_event_defaults(db_session):
    event = await _event(db_session)

    result = await db_session.get(Event, event.id)
    assert result.slug == "launch-party"
    assert result.is_active is True
    assert result.created_at


@pytest.mark.asyncio
async def test_event_slug_unique(db_session):
    await _event(db_session)
    db_session.add(Event(name="Other", slug="launch-party"))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_photo_defaults(db_session):
    event = await _event(db_session)
    photo = Photo(event_id=event.id, original_path="/uploads/a.jpg")
    db_session.add(photo)
    await db_session.commit()

    result = await db_session.get(Photo, photo.id)
    assert result.status == "pending"
    assert result.display_order is None
    assert result.submitter_name is None


@pytest.mark.asyncio
async def test_display_settings_defaults(db_session):
    event = await _event(db_session)
    row = DisplaySettings(event_id=event.id)
    db_session.add(row)
    await db_session.commit()

    result = await db_session.get(DisplaySettings, row.id)
    assert result.display_format == "16:9-default"
    assert result.slide_interval == 8
    assert result.transition_effect == "slide"
    assert result.caption_bg_color == "rgba(0,0,0,0.5)"
    assert result.text_background_opacity == 50
    assert result.updated_at


@pytest.mark.asyncio
async def test_one_settings_row_per_event(db_session):
    event = await _event(db_session)
    db_session.add(DisplaySettings(event_id=event.id))
    await db_session.commit()
    db_session.add(DisplaySettings(event_id=event.id))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_one_analytics_row_per_day(db_session):
    event = await _event(db_session)
    db_session.add(Analytics(event_id=event.id, date="2024-05-01"))
    await db_session.commit()

    row = (await db_session.get(Analytics, 1))
    assert row.uploads == 0 and row.qr_scans == 0

    db_session.add(Analytics(event_id=event.id, date="2024-05-01"))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_create_user(db_session):
    user = User(username="admin", password_hash="hashed")
    db_session.add(user)
    await db_session.commit()

    result = await db_session.get(User, user.id)
    assert result is not None
    assert result.username == "admin"
