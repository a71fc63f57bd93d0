import pytest
from httpx import ASGITransport, AsyncClient

from eventwall.main import app
from helpers import approve, create_event, image_bytes, upload_photo


async def _approved_photos(client, event, count, **kwargs):
    photos = await upload_photo(client, event, count=count, **kwargs)
    for photo in photos:
        await approve(client, photo["id"])
    return photos


@pytest.mark.asyncio
async def test_display_images_only_approved_with_anonymous_default():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        [shown] = await _approved_photos(client, event, 1, caption="Hello")
        await upload_photo(client, event)
        response = await client.get("/api/display/images", params={"event": event["slug"]})

    [image] = response.json()["data"]
    assert image["id"] == shown["id"]
    assert image["submitterName"] == "Anonymous"
    assert image["caption"] == "Hello"
    assert set(image) == {"id", "originalPath", "submitterName", "caption", "displayOrder", "createdAt"}


@pytest.mark.asyncio
async def test_display_images_order_unset_last_then_newest():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        a, b, c, d = await _approved_photos(client, event, 4)
        await client.post("/api/photos/display-order", json={"photoId": c["id"], "displayOrder": 0})
        await client.post("/api/photos/display-order", json={"photoId": a["id"], "displayOrder": 1})
        response = await client.get("/api/display/images", params={"event": event["slug"]})

    ids = [img["id"] for img in response.json()["data"]]
    assert ids == [c["id"], a["id"], d["id"], b["id"]]


@pytest.mark.asyncio
async def test_display_images_blacklist():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        [kept] = await _approved_photos(client, event, 1, caption="Lovely evening")
        await _approved_photos(client, event, 1, caption="This is SPAM")
        await _approved_photos(client, event, 1, submitter="Rude Guy")
        await client.post(
            "/api/display-settings",
            json={"eventId": event["id"], "blacklistWords": "spam, rude ,"},
        )
        response = await client.get("/api/display/images", params={"event": event["slug"]})

    assert [img["id"] for img in response.json()["data"]] == [kept["id"]]


@pytest.mark.asyncio
async def test_reorder_skips_unknown_ids():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        a, b = await _approved_photos(client, event, 2)
        response = await client.post(
            "/api/photos/reorder",
            json={"photoOrders": [
                {"photoId": b["id"], "displayOrder": 0},
                {"photoId": 999999, "displayOrder": 1},
                {"photoId": a["id"], "displayOrder": 2},
            ]},
        )
        display = await client.get("/api/display/images", params={"event": event["slug"]})

    updated = response.json()["data"]
    assert [(p["id"], p["displayOrder"]) for p in updated] == [(b["id"], 0), (a["id"], 2)]
    assert [img["id"] for img in display.json()["data"]] == [b["id"], a["id"]]


@pytest.mark.asyncio
async def test_display_order_rejects_negative():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/photos/display-order", json={"photoId": 1, "displayOrder": -1})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_display_settings_defaults_when_unsaved():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        response = await client.get("/api/display-settings", params={"event": event["slug"]})

    data = response.json()["data"]
    assert data["id"] is None
    assert data["eventId"] == event["id"]
    assert data["displayFormat"] == "16:9-default"
    assert data["slideInterval"] == 8
    assert data["autoRotate"] is True
    assert data["textMaxWidth"] == "full"


@pytest.mark.asyncio
async def test_display_settings_upsert():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        first = await client.post(
            "/api/display-settings",
            json={"eventId": event["id"], "slideInterval": 15, "transitionEffect": "fade"},
        )
        second = await client.post(
            "/api/display-settings",
            json={"eventId": event["id"], "displayFormat": "text-only"},
        )
        current = await client.get("/api/display-settings", params={"event": event["slug"]})

    assert first.status_code == 200
    assert first.json()["data"]["id"] == second.json()["data"]["id"]
    data = current.json()["data"]
    assert data["displayFormat"] == "text-only"
    # a save writes the full record, so omitted fields return to defaults
    assert data["slideInterval"] == 8
    assert data["transitionEffect"] == "slide"


@pytest.mark.asyncio
async def test_display_settings_validation_errors():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        response = await client.post(
            "/api/display-settings",
            json={"eventId": event["id"], "slideInterval": 61, "transitionEffect": "spin"},
        )

    assert response.status_code == 422
    fields = {e["field"] for e in response.json()["data"]}
    assert fields == {"slideInterval", "transitionEffect"}


@pytest.mark.asyncio
async def test_display_settings_unknown_event():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/display-settings", json={"eventId": 999999})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_background_and_logo_upload():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        background = await client.post(
            "/api/display-settings/background",
            params={"event": event["slug"]},
            files={"image": ("bg.jpg", image_bytes(size=(2500, 1400)), "image/jpeg")},
        )
        logo = await client.post(
            "/api/display-settings/logo",
            params={"event": event["slug"]},
            files={"image": ("logo.png", image_bytes(size=(600, 600), fmt="PNG"), "image/png")},
        )

    assert background.status_code == 200
    assert background.json()["data"]["backgroundPath"].endswith(".jpg")
    data = logo.json()["data"]
    assert data["logoPath"].endswith(".png")
    assert data["backgroundPath"] == background.json()["data"]["backgroundPath"]
    assert data["slideInterval"] == 8


@pytest.mark.asyncio
async def test_stats_counts_and_views():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        photos = await upload_photo(client, event, count=3)
        await approve(client, photos[0]["id"])
        await client.post("/api/photos/moderate", json={"photoId": photos[1]["id"], "action": "reject"})
        await client.get("/api/stats", params={"event": event["slug"]})
        response = await client.get("/api/stats", params={"event": event["slug"]})

    data = response.json()["data"]
    assert data["pending"] == 1
    assert data["approved"] == 1
    assert data["rejected"] == 1
    assert data["archived"] == 0
    assert data["totalUploads"] == 3
    assert data["views"] == 2


@pytest.mark.asyncio
async def test_qrcode_and_scan_tracking():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        qr = await client.get("/api/qrcode", params={"event": event["slug"]})
        scan = await client.post(f"/api/events/{event['id']}/analytics/qr-scan")
        stats = await client.get("/api/stats", params={"event": event["slug"]})
        missing = await client.post("/api/events/999999/analytics/qr-scan")

    data = qr.json()["data"]
    assert data["uploadUrl"] == f"http://test/upload?event={event['slug']}"
    assert data["qrCodeUrl"].startswith("https://api.qrserver.com/v1/create-qr-code/")
    assert "http%3A%2F%2Ftest%2Fupload" in data["qrCodeUrl"]
    assert scan.status_code == 200
    assert stats.json()["data"]["qrScans"] == 1
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_analytics_date_range():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        event = await create_event(client)
        await upload_photo(client, event)
        everything = await client.get(f"/api/events/{event['id']}/analytics")
        future = await client.get(
            f"/api/events/{event['id']}/analytics", params={"startDate": "2999-01-01"}
        )

    assert len(everything.json()["data"]) == 1
    assert everything.json()["data"][0]["uploads"] == 1
    assert future.json()["data"] == []
