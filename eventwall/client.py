"""Async HTTP client for the eventwall JSON API.

Every endpoint answers with the ``{"status", "data", "message"}`` envelope;
the client unwraps ``data`` and turns error envelopes and transport failures
into :class:`ApiError`. A success payload that does not match its schema is
reported the same way.
"""
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from eventwall.schemas.analytics import StatsResponse
from eventwall.schemas.display_settings import DisplaySettingsResponse
from eventwall.schemas.event import EventResponse
from eventwall.schemas.photo import DisplayImage, PhotoResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


M = TypeVar("M", bound=BaseModel)


def _parse(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning("Malformed %s payload: %s", model.__name__, e)
        raise ApiError(f"Unexpected response from server ({model.__name__})", data=e.errors()) from e


def _parse_list(model: type[M], data: Any) -> list[M]:
    try:
        return TypeAdapter(list[model]).validate_python(data)
    except ValidationError as e:
        logger.warning("Malformed %s list payload: %s", model.__name__, e)
        raise ApiError(f"Unexpected response from server ({model.__name__})", data=e.errors()) from e


class EventWallClient:
    def __init__(
        self,
        base_url: str,
        event: str | None = None,
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.event = event
        headers = {"X-API-Key": api_key} if api_key else {}
        self._http = httpx.AsyncClient(
            base_url=base_url, headers=headers, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "EventWallClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    def _params(self, **extra) -> dict:
        params = {k: v for k, v in extra.items() if v is not None}
        if self.event:
            params["event"] = self.event
        return params

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(str(e) or type(e).__name__) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict) or "status" not in body:
            if response.is_success:
                return body
            raise ApiError(f"HTTP {response.status_code}", response.status_code)

        if body["status"] != "success" or not response.is_success:
            raise ApiError(
                body.get("message") or f"HTTP {response.status_code}",
                response.status_code,
                body.get("data"),
            )
        return body.get("data")

    # photos

    async def list_photos(self, status: str | None = None) -> list[PhotoResponse]:
        data = await self._request("GET", "/api/photos", params=self._params(status=status))
        return _parse_list(PhotoResponse, data)

    async def recent_photos(self, limit: int = 6) -> list[PhotoResponse]:
        data = await self._request("GET", "/api/photos/recent", params=self._params(limit=limit))
        return _parse_list(PhotoResponse, data)

    async def get_photo(self, photo_id: int) -> PhotoResponse:
        data = await self._request("GET", f"/api/photos/{photo_id}")
        return _parse(PhotoResponse, data)

    async def upload_photos(
        self,
        files: list[tuple[str, bytes, str]],
        submitter_name: str | None = None,
        caption: str | None = None,
        event_id: int | None = None,
    ) -> list[PhotoResponse]:
        """Upload ``(filename, content, content_type)`` triples as one submission."""
        form = {}
        if submitter_name:
            form["submitterName"] = submitter_name
        if caption:
            form["caption"] = caption
        if event_id is not None:
            form["eventId"] = str(event_id)
        data = await self._request(
            "POST",
            "/api/photos/upload",
            params=self._params(),
            data=form,
            files=[("photos", f) for f in files],
        )
        return _parse_list(PhotoResponse, data)

    async def moderate(self, photo_id: int, action: str) -> PhotoResponse:
        data = await self._request(
            "POST", "/api/photos/moderate", json={"photoId": photo_id, "action": action}
        )
        return _parse(PhotoResponse, data)

    async def set_display_order(self, photo_id: int, display_order: int) -> PhotoResponse:
        data = await self._request(
            "POST",
            "/api/photos/display-order",
            json={"photoId": photo_id, "displayOrder": display_order},
        )
        return _parse(PhotoResponse, data)

    async def reorder(self, orders: list[tuple[int, int]]) -> list[PhotoResponse]:
        payload = {"photoOrders": [{"photoId": pid, "displayOrder": order} for pid, order in orders]}
        data = await self._request("POST", "/api/photos/reorder", json=payload)
        return _parse_list(PhotoResponse, data)

    # display

    async def display_images(self) -> list[DisplayImage]:
        data = await self._request("GET", "/api/display/images", params=self._params())
        return _parse_list(DisplayImage, data)

    async def display_settings(self) -> DisplaySettingsResponse:
        data = await self._request("GET", "/api/display-settings", params=self._params())
        return _parse(DisplaySettingsResponse, data)

    async def save_display_settings(self, payload: dict) -> DisplaySettingsResponse:
        """Upsert a full settings record; ``payload`` uses camelCase keys and includes eventId."""
        data = await self._request("POST", "/api/display-settings", json=payload)
        return _parse(DisplaySettingsResponse, data)

    async def upload_background(self, filename: str, content: bytes, content_type: str) -> DisplaySettingsResponse:
        data = await self._request(
            "POST",
            "/api/display-settings/background",
            params=self._params(),
            files={"image": (filename, content, content_type)},
        )
        return _parse(DisplaySettingsResponse, data)

    async def upload_logo(self, filename: str, content: bytes, content_type: str) -> DisplaySettingsResponse:
        data = await self._request(
            "POST",
            "/api/display-settings/logo",
            params=self._params(),
            files={"image": (filename, content, content_type)},
        )
        return _parse(DisplaySettingsResponse, data)

    # events and stats

    async def list_events(self) -> list[EventResponse]:
        data = await self._request("GET", "/api/events")
        return _parse_list(EventResponse, data)

    async def event_by_slug(self, slug: str) -> EventResponse:
        data = await self._request("GET", f"/api/events/slug/{slug}")
        return _parse(EventResponse, data)

    async def stats(self) -> StatsResponse:
        data = await self._request("GET", "/api/stats", params=self._params())
        return _parse(StatsResponse, data)

    async def qrcode(self) -> dict:
        return await self._request("GET", "/api/qrcode", params=self._params())

    async def create_event(self, name: str, slug: str | None = None) -> EventResponse:
        payload = {"name": name}
        if slug:
            payload["slug"] = slug
        data = await self._request("POST", "/api/events", json=payload)
        return _parse(EventResponse, data)
