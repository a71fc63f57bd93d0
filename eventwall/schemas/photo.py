from typing import Literal

from pydantic import Field

from eventwall.schemas.base import CamelModel

PhotoStatus = Literal["pending", "approved", "rejected", "archived"]
ModerationAction = Literal["approve", "reject", "archive"]

PHOTO_STATUSES: tuple[str, ...] = ("pending", "approved", "rejected", "archived")
MAX_CAPTION_LENGTH = 200


class PhotoResponse(CamelModel):
    id: int
    event_id: int
    original_path: str
    submitter_name: str | None = None
    caption: str | None = None
    status: PhotoStatus
    display_order: int | None = None
    created_at: str


class DisplayImage(CamelModel):
    """Display-ready projection of an approved photo."""

    id: int
    original_path: str
    submitter_name: str = "Anonymous"
    caption: str | None = None
    display_order: int | None = None
    created_at: str


class ModerationRequest(CamelModel):
    photo_id: int
    action: ModerationAction


class PhotoDisplayOrder(CamelModel):
    photo_id: int
    display_order: int = Field(ge=0)


class ReorderRequest(CamelModel):
    photo_orders: list[PhotoDisplayOrder]
