import logging
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from eventwall.client import ApiError, EventWallClient
from eventwall.display.layouts import Frame, render_layout
from eventwall.display.rotation import Direction
from eventwall.display.styles import PREVIEW
from eventwall.schemas.display_settings import (
    SETTINGS_FIELDS,
    DisplaySettingsFields,
    DisplaySettingsResponse,
)
from eventwall.schemas.photo import DisplayImage

logger = logging.getLogger(__name__)

SAMPLE_CREATED_AT = "2024-01-01T12:00:00+00:00"

SAMPLE_IMAGES: tuple[DisplayImage, ...] = tuple(
    DisplayImage(
        id=i,
        original_path=f"https://placehold.co/400x300/{color}/ffffff?text=Sample+Photo+{i}",
        submitter_name=name,
        caption=f"This is the {ordinal} example photo caption",
        created_at=SAMPLE_CREATED_AT,
    )
    for i, (color, name, ordinal) in enumerate(
        [
            ("667788", "John Doe", "first"),
            ("886677", "Jane Smith", "second"),
            ("778866", "Bob Johnson", "third"),
            ("668877", "Alice Brown", "fourth"),
        ],
        start=1,
    )
)


class SettingsForm:
    """Editable display settings with a live preview.

    ``values`` holds what the user typed, valid or not. The preview renders
    from the last valid settings, so a bad field never breaks it.
    """

    def __init__(self, client: EventWallClient, event_id: int | None = None):
        self._client = client
        self.event_id = event_id
        self._valid = DisplaySettingsFields()
        self.values: dict[str, Any] = self._valid.model_dump()
        self.errors: dict[str, str] = {}
        self.submit_error: str | None = None
        self.load_error: str | None = None
        self.saved: DisplaySettingsResponse | None = None

    async def load(self) -> bool:
        """Fetch the saved settings; on failure keep the current values and record the error."""
        try:
            current = await self._client.display_settings()
        except ApiError as e:
            logger.warning("Loading display settings failed: %s", e.message)
            self.load_error = e.message
            return False

        self.load_error = None
        self._apply(current)
        return True

    def _apply(self, settings: DisplaySettingsResponse) -> None:
        if settings.event_id is not None:
            self.event_id = settings.event_id
        self.saved = settings
        self._valid = DisplaySettingsFields.model_validate(settings.model_dump(include=set(SETTINGS_FIELDS)))
        self.values = self._valid.model_dump()
        self.errors = {}

    @property
    def settings(self) -> DisplaySettingsFields:
        return self._valid

    def set(self, field: str, value: Any) -> bool:
        """Update one field (snake_case or camelCase); returns False and records a message if invalid."""
        name = field if field in SETTINGS_FIELDS else to_snake(field)
        if name not in SETTINGS_FIELDS:
            raise KeyError(field)

        self.values[name] = value
        try:
            candidate = DisplaySettingsFields.model_validate({**self._valid.model_dump(), name: value})
        except ValidationError as e:
            self.errors[name] = e.errors()[0]["msg"]
            return False

        self._valid = candidate
        self.errors.pop(name, None)
        return True

    def preview(self, index: int = 0) -> Frame:
        return render_layout(
            self._valid,
            SAMPLE_IMAGES,
            index % len(SAMPLE_IMAGES),
            Direction.FORWARD,
            PREVIEW,
        )

    async def submit(self) -> bool:
        if self.errors:
            self.submit_error = "Fix the invalid fields before saving"
            return False
        if self.event_id is None:
            self.submit_error = "No event selected"
            return False

        payload = {**self._valid.to_json(), "eventId": self.event_id}
        try:
            saved = await self._client.save_display_settings(payload)
        except ApiError as e:
            logger.warning("Saving display settings failed: %s", e.message)
            self.submit_error = e.message
            if isinstance(e.data, list):
                for item in e.data:
                    name = to_snake(item.get("field", ""))
                    if name in SETTINGS_FIELDS:
                        self.errors[name] = item.get("message", "Invalid value")
            return False

        self.submit_error = None
        self._apply(saved)
        return True
