from pydantic import Field

from eventwall.schemas.base import CamelModel

SLUG_PATTERN = r"^[a-z0-9-]+$"


class EventCreate(CamelModel):
    name: str = Field(min_length=1)
    slug: str | None = Field(default=None, min_length=1, pattern=SLUG_PATTERN)
    description: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_active: bool = True


class EventUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=1, pattern=SLUG_PATTERN)
    description: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_active: bool | None = None


class EventResponse(CamelModel):
    id: int
    name: str
    slug: str
    description: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_active: bool
    created_at: str
