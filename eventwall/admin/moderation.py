"""Moderation list: status filter, client-side sort, fixed-size pages."""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Sequence, TypeVar

from eventwall.client import ApiError, EventWallClient
from eventwall.schemas.photo import PHOTO_STATUSES, PhotoResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_SIZE = 9


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    number: int
    total_pages: int
    total: int
    per_page: int = PAGE_SIZE

    @property
    def start(self) -> int:
        """1-based position of the first item on the page (0 when empty)."""
        return (self.number - 1) * self.per_page + 1 if self.items else 0

    @property
    def end(self) -> int:
        return self.start + len(self.items) - 1 if self.items else 0

    @property
    def summary(self) -> str:
        return f"showing {self.start} to {self.end} of {self.total}"


def paginate(items: Sequence[T], page: int, per_page: int = PAGE_SIZE) -> Page[T]:
    total_pages = math.ceil(len(items) / per_page)
    number = min(max(page, 1), max(1, total_pages))
    offset = (number - 1) * per_page
    return Page(
        items=tuple(items[offset:offset + per_page]),
        number=number,
        total_pages=total_pages,
        total=len(items),
        per_page=per_page,
    )


def sort_photos(photos: Sequence[PhotoResponse], order: SortOrder) -> list[PhotoResponse]:
    return sorted(photos, key=lambda p: p.created_at, reverse=order == SortOrder.NEWEST)


class ModerationView:
    def __init__(self, client: EventWallClient, status: str = "pending", sort: SortOrder = SortOrder.NEWEST):
        if status not in PHOTO_STATUSES:
            raise ValueError(f"Unknown status: {status}")
        self._client = client
        self.status = status
        self.sort = SortOrder(sort)
        self.page_number = 1
        self.photos: list[PhotoResponse] = []
        self.counts: dict[str, int] = {s: 0 for s in PHOTO_STATUSES}
        self.error: str | None = None
        self.action_error: str | None = None
        self.loading = False
        self._seq = 0

    async def load(self) -> None:
        self._seq += 1
        seq = self._seq
        self.loading = True
        try:
            photos = await self._client.list_photos(self.status)
            stats = await self._client.stats()
        except ApiError as e:
            if seq != self._seq:
                return
            logger.warning("Loading %s photos failed: %s", self.status, e.message)
            self.error = e.message
            self.loading = False
            return

        if seq != self._seq:
            logger.debug("Dropping stale moderation load #%d", seq)
            return
        self.photos = sort_photos(photos, self.sort)
        self.counts = {s: getattr(stats, s) for s in PHOTO_STATUSES}
        self.error = None
        self.loading = False

    async def set_status(self, status: str) -> None:
        if status not in PHOTO_STATUSES:
            raise ValueError(f"Unknown status: {status}")
        self.status = status
        self.page_number = 1
        self.photos = []
        await self.load()

    def set_sort(self, order: SortOrder) -> None:
        self.sort = SortOrder(order)
        self.page_number = 1
        self.photos = sort_photos(self.photos, self.sort)

    def go_to_page(self, number: int) -> None:
        self.page_number = paginate(self.photos, number).number

    @property
    def page(self) -> Page[PhotoResponse]:
        return paginate(self.photos, self.page_number)

    @property
    def message(self) -> str | None:
        """Inline status text: fetch error or empty state, None when there is a list to show."""
        if self.error is not None:
            return f"Error loading photos: {self.error}"
        if not self.loading and not self.photos:
            return f"No {self.status} photos found."
        return None

    async def act(self, photo_id: int, action: str) -> bool:
        try:
            await self._client.moderate(photo_id, action)
        except ApiError as e:
            logger.warning("Moderation %s on photo %s failed: %s", action, photo_id, e.message)
            self.action_error = e.message
            return False

        self.action_error = None
        self.photos = [p for p in self.photos if p.id != photo_id]
        self.page_number = self.page.number
        await self.load()
        return True

    async def approve(self, photo_id: int) -> bool:
        return await self.act(photo_id, "approve")

    async def reject(self, photo_id: int) -> bool:
        return await self.act(photo_id, "reject")

    async def archive(self, photo_id: int) -> bool:
        return await self.act(photo_id, "archive")
