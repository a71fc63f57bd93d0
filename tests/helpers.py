import io
import uuid

from PIL import Image

from eventwall.schemas.display_settings import DisplaySettingsResponse
from eventwall.schemas.photo import DisplayImage


def image_bytes(size=(800, 600), fmt="JPEG", color=(200, 40, 40)) -> bytes:
    mode = "RGBA" if fmt == "PNG" else "RGB"
    img = Image.new(mode, size, color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


async def create_event(client, name="Test Party") -> dict:
    """Create an isolated event so tests never see each other's photos."""
    slug = f"test-{uuid.uuid4().hex[:10]}"
    response = await client.post("/api/events", json={"name": name, "slug": slug})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def upload_photo(client, event, caption=None, submitter=None, count=1) -> list[dict]:
    files = [("photos", (f"p{i}.jpg", image_bytes(), "image/jpeg")) for i in range(count)]
    data = {}
    if caption:
        data["caption"] = caption
    if submitter:
        data["submitterName"] = submitter
    response = await client.post(
        "/api/photos/upload", params={"event": event["slug"]}, files=files, data=data
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def approve(client, photo_id) -> dict:
    response = await client.post("/api/photos/moderate", json={"photoId": photo_id, "action": "approve"})
    assert response.status_code == 200, response.text
    return response.json()["data"]


def display_image(image_id, display_order=None, caption=None, created_at="2024-05-01T10:00:00+00:00"):
    return DisplayImage(
        id=image_id,
        original_path=f"/uploads/{image_id}.jpg",
        submitter_name=f"Guest {image_id}",
        caption=caption,
        display_order=display_order,
        created_at=created_at,
    )


def display_settings(**overrides) -> DisplaySettingsResponse:
    return DisplaySettingsResponse(id=1, event_id=1, **overrides)


class _Handle:
    def __init__(self, scheduler, due, callback):
        self._scheduler = scheduler
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by advance(); nothing fires until the test moves the clock."""

    def __init__(self):
        self.now = 0.0
        self._handles: list[_Handle] = []

    def call_later(self, delay, callback):
        handle = _Handle(self, self.now + delay, callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[_Handle]:
        return [h for h in self._handles if not h.cancelled]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self._handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


class FakeSource:
    """In-memory DataSource; tests push snapshots or errors directly."""

    def __init__(self, snapshot=None):
        self.snapshot = snapshot
        self.cadence = None
        self.cadence_history = []
        self.refreshes = 0
        self._subscribers = []

    async def fetch(self):
        return self.snapshot

    async def refresh(self):
        self.refreshes += 1
        if self.snapshot is not None:
            self.publish(self.snapshot)

    def publish(self, snapshot):
        self.snapshot = snapshot
        for on_data, _ in list(self._subscribers):
            on_data(snapshot)

    def fail(self, exc):
        for _, on_error in list(self._subscribers):
            on_error(exc)

    def subscribe(self, on_data, on_error=None):
        from eventwall.display.source import Subscription

        entry = (on_data, on_error)
        self._subscribers.append(entry)
        return Subscription(lambda: self._subscribers.remove(entry))

    @property
    def subscriber_count(self):
        return len(self._subscribers)

    def set_cadence(self, seconds):
        if seconds != self.cadence:
            self.cadence_history.append(seconds)
        self.cadence = seconds
