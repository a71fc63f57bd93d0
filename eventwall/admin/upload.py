import logging
from dataclasses import dataclass

from eventwall.client import ApiError, EventWallClient
from eventwall.schemas.photo import MAX_CAPTION_LENGTH, PhotoResponse

logger = logging.getLogger(__name__)

DEFAULT_EVENT_NAME = "Event"
MAX_FILES = 5
MAX_FILE_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class UploadFile:
    filename: str
    content: bytes
    content_type: str


class UploadPage:
    """Attendee upload form, personalised by the ``event`` query parameter."""

    def __init__(self, client: EventWallClient, query: dict[str, str] | None = None):
        self._client = client
        self.event_name = (query or {}).get("event") or DEFAULT_EVENT_NAME
        self.files: list[UploadFile] = []
        self.error: str | None = None
        self.success: str | None = None
        self.uploaded: list[PhotoResponse] = []

    @property
    def heading(self) -> str:
        return f"Share Your {self.event_name} Photos"

    def add_file(self, file: UploadFile) -> bool:
        if not file.content_type.startswith("image/"):
            self.error = "Please select an image file only (JPG, PNG, etc)."
            return False
        if len(file.content) > MAX_FILE_BYTES:
            self.error = f"{file.filename} is larger than 10MB."
            return False
        if len(self.files) >= MAX_FILES:
            self.error = f"You can upload up to {MAX_FILES} photos at once."
            return False
        self.files.append(file)
        self.error = None
        return True

    async def submit(self, submitter_name: str | None = None, caption: str | None = None) -> bool:
        if not self.files:
            self.error = "Please select a photo to upload."
            return False
        if caption and len(caption) > MAX_CAPTION_LENGTH:
            self.error = f"Captions are limited to {MAX_CAPTION_LENGTH} characters."
            return False

        try:
            self.uploaded = await self._client.upload_photos(
                [(f.filename, f.content, f.content_type) for f in self.files],
                submitter_name=submitter_name,
                caption=caption,
            )
        except ApiError as e:
            logger.warning("Upload failed: %s", e.message)
            self.error = e.message
            self.success = None
            return False

        self.files = []
        self.error = None
        self.success = "Your photo has been submitted for moderation."
        return True
